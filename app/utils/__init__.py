"""
Utility modules for the guide validator web service
"""
