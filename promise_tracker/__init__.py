"""
Core package for the promise tracker dashboard.

Submodules provide data loading, status labelling, metrics, filtering, and
user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
