"""Tests for smartsort.language"""
