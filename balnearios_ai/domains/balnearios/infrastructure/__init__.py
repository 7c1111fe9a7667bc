"""
Balnearios Infrastructure Layer
"""
