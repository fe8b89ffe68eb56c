"""Tests for smartsort.pyutils"""
