"""Article Claim Source Finder - Streamlit UI."""

import asyncio

import streamlit as st

from src.config import DEFAULT_MAX_SOURCES, DEFAULT_RETRY_COUNT, DEFAULT_TIMEOUT_MS, MIN_ARTICLE_LENGTH
from src.graph.workflow import InvalidArticleError, run_article_check
from src.logging_config import setup_logging
from src.models import SourceConfig

setup_logging()

st.set_page_config(
    page_title="Article Claim Source Finder",
    page_icon="📰",
    layout="wide",
)

st.title("📰 Article Claim Source Finder")
st.markdown("Flag inaccurate statements in an article and find fact-checking sources for each one.")

# Sidebar
with st.sidebar:
    st.header("⚙️ Settings")

    max_sources = st.slider("Sources per claim", min_value=1, max_value=10, value=DEFAULT_MAX_SOURCES)
    include_fact_check_sites = st.checkbox("Add fact-check query", value=True)
    include_trusted_domains = st.checkbox("Boost trusted fact-checkers", value=True)

    st.divider()

    st.subheader("Search")
    timeout_ms = st.number_input("Timeout (ms)", min_value=1000, max_value=60000, value=DEFAULT_TIMEOUT_MS, step=1000)
    max_attempts = st.number_input("Max attempts", min_value=1, max_value=5, value=max(DEFAULT_RETRY_COUNT, 1))
    verbose = st.checkbox("Verbose logging", value=False)

    st.divider()

    show_trace = st.checkbox("Show Node Trace", value=True)

article = st.text_area(
    "Paste an article to check:",
    placeholder="e.g., The Great Wall of China is visible from the Moon with the naked eye...",
    height=250,
)

if st.button("🔍 Check Article", type="primary"):
    options = SourceConfig(
        max_sources=max_sources,
        include_fact_check_sites=include_fact_check_sites,
        include_trusted_domains=include_trusted_domains,
        retry_count=int(max_attempts),
        timeout_ms=int(timeout_ms),
        verbose=verbose,
        current_retry=1,
    )

    try:
        with st.spinner("Checking article..."):
            result = asyncio.run(run_article_check(article, options))
    except InvalidArticleError:
        st.warning(f"Please enter an article of at least {MIN_ARTICLE_LENGTH} characters.")
    else:
        claims = result["claims"]
        if not claims:
            st.success("No inaccurate statements found.")
        else:
            st.markdown(f"### {len(claims)} inaccurate claim(s) found")

        for claim in claims:
            with st.expander(claim.sentence, expanded=True):
                if not claim.sources:
                    st.info("No sources found for this claim.")
                for src in claim.sources:
                    st.markdown(f"**{src.rank}. [{src.title}]({src.link})** · `{src.source}`")
                    if src.snippet:
                        st.caption(src.snippet)
                    st.text(f"Relevance score: {src.relevance_score:g}")

        if show_trace:
            st.markdown("### Node Execution Trace")
            for trace in result["agent_trace"]:
                status = "✅" if trace.success else "❌"
                st.markdown(
                    f"{status} **{trace.node}**: {trace.output_summary} "
                    f"({trace.duration_seconds:.2f}s, ${trace.cost_usd:.4f})"
                )
            st.metric("Total cost", f"${result['total_cost_usd']:.4f}")
