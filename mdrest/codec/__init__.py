"""
Wire codec module.

Turns request parameter objects into query strings and URL paths, and JSON
payloads into response models.
"""
