"""
Balnearios domain: resort search by city and amenities.
"""
