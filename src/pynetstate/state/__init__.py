"""State/store layer.

This package is the single source of truth for how device lists, service
lists and property updates from the network manager are merged into one
ordered, observable model.
"""
