"""
Core package for the municipal admin dashboard.

Submodules provide the WordPress API client, data loading with sample
fallback, filtering and statistics, and the Streamlit user interface that
is orchestrated by the top-level `app.py`.
"""
