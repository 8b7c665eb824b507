"""
Config Module - Money management policy and account settings.
"""
