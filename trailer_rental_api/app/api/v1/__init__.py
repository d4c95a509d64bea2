"""
Version 1 of the Trailer Rental API.
"""
