"""Use-case package: single-purpose async callables over domain ports.

Each use case wraps one gateway interaction (plus recents bookkeeping where
relevant) and converts bridge failures into ``UseCaseError`` via
``error_mapping.map_bridge_error``.
"""
