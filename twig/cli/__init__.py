"""
twig command-line interface.
"""
