"""Tests for smartsort.collation"""
