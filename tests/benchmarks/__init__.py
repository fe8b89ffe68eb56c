"""Benchmarks for smartsort"""
