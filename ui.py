"""Streamlit UI for the Japanese helper commands."""
import os

import requests
import streamlit as st

# API base URL
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

DIRECTION_LABELS = {
    "Japanese → English": "ja-en",
    "English → Japanese": "en-ja",
}


def check_api_health():
    """Check if API is running."""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.RequestException:
        return False


def _error_detail(response):
    try:
        return response.json().get("detail", response.text)
    except ValueError:
        return response.text


def request_translation(text, direction):
    """Send text to the API and return the translation."""
    try:
        response = requests.post(
            f"{API_BASE_URL}/translate",
            json={"text": text, "direction": direction},
            timeout=120,
        )
    except requests.RequestException as e:
        st.error(f"Translation request failed: {e}")
        return None

    if response.status_code != 200:
        st.error(f"Translation failed: {_error_detail(response)}")
        return None
    return response.json()["translation"]


def request_lookup(term):
    """Look up a term and return the Markdown entry."""
    try:
        response = requests.post(f"{API_BASE_URL}/lookup", json={"term": term}, timeout=30)
    except requests.RequestException as e:
        st.error(f"Lookup request failed: {e}")
        return None

    if response.status_code == 404:
        st.warning(_error_detail(response))
        return None
    if response.status_code != 200:
        st.error(f"Lookup failed: {_error_detail(response)}")
        return None
    return response.json()["markdown"]


def main():
    st.set_page_config(
        page_title="Japanese Helper",
        page_icon="🈁",
        layout="wide"
    )

    st.title("🈁 Japanese Helper")

    if not check_api_health():
        st.error("⚠️ API server is not running. Please start the API server first:")
        st.code("python start_api.py", language="bash")
        st.stop()

    translate_tab, lookup_tab = st.tabs(["Translate", "Dictionary"])

    with translate_tab:
        label = st.radio("Direction", list(DIRECTION_LABELS), horizontal=True)
        text = st.text_area("Text", height=200)

        if st.button("Translate →", type="primary", disabled=not text.strip()):
            with st.spinner("Translating..."):
                translation = request_translation(text, DIRECTION_LABELS[label])
            if translation:
                st.text_area("Translation", translation, height=200)

    with lookup_tab:
        term = st.text_input("Word or phrase")

        if st.button("Look up", type="primary", disabled=not term.strip()):
            with st.spinner("Looking up..."):
                entry = request_lookup(term.strip())
            if entry:
                st.markdown(entry)
                st.code(entry, language="markdown")

    with st.sidebar:
        st.header("ℹ️ Information")
        st.markdown("""
        **Translate:** sends text to the configured LLM backend.

        **Dictionary:** looks up words on jisho.org and shows the entry as
        Markdown, ready to paste into your notes.
        """)


if __name__ == "__main__":
    main()
