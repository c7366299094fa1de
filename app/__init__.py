"""
Application surfaces - command-line interface and Streamlit dashboard.
"""
