"""
Core data logic for SentiNik.

Contains the modules that turn CSV text into dashboard data:
- Loader (async fetch of the CSV resource)
- CSV Parser
- Filter Engine
- Aggregators (chart-ready summaries)
- Table view and export
"""
