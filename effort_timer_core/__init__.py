"""
Entry-point package for the effort timer application.
"""
