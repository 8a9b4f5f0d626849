"""
One-off maintenance scripts
"""
