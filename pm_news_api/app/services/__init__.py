"""
Service layer abstraction.

Services hold logic that sits on top of the store, such as the
aggregation behind the filter options endpoint.  Record storage,
filtering and pagination live in ``core.storage``.
"""
