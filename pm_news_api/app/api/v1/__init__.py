"""
Version 1 of the API: news items, PM resources and filter options.
"""
