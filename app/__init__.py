"""
Guide Validator web service
"""
