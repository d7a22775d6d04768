"""Algorithms for the mvpoly package."""
