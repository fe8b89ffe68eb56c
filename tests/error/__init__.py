"""Tests for smartsort.error"""
