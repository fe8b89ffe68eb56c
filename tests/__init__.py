"""Tests for smartsort"""
