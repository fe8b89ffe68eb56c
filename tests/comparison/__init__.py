"""Tests for smartsort.comparison"""
