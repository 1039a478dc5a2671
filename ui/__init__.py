"""Streamlit front end for RBC-O2."""
