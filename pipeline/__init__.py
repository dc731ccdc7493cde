"""
LinkedIn import pipeline for the Portfolio Backend.
"""
