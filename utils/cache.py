# rural_health/utils/cache.py
import streamlit as st

def cache_data(func=None, **kwargs):
    """st.cache_data without the spinner; works bare (@cache_data) or with arguments.

    Only for pure presentation builders. Healthcare stats are fetched fresh on every call.
    """
    kwargs.setdefault("show_spinner", False)
    if func is None:
        return st.cache_data(**kwargs)
    return st.cache_data(func, **kwargs)
