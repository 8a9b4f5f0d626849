"""
Business logic for guide profiles and authentication
"""
