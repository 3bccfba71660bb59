"""
Streamlit Frontend for the Cash Flow AI translation layer

Small admin/demo surface over a TranslationSession:
- Language toggle (English / Español) in the sidebar
- Translate a single text or a batch of texts
- Inspect and reset the translation cache
- Check which backends are configured

DESIGN PRINCIPLES:
1. One TranslationSession per browser session (st.session_state),
   never shared between users
2. Translation failures show the original text, with the failure
   visible on the cache page
"""

import asyncio

import streamlit as st

from cashflow_i18n.models.audit import AuditEventType
from cashflow_i18n.models.translation import LANGUAGE_NAMES, Language
from cashflow_i18n.orchestrator import TranslationSession, create_translation_session


# Page configuration
st.set_page_config(
    page_title="Cash Flow AI - Translations",
    page_icon="🌐",
    layout="wide",
    initial_sidebar_state="expanded",
)


def run_async(coro):
    """Helper to run async functions in Streamlit."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def get_session() -> TranslationSession:
    """Get or create the translation session of this browser session."""
    if "translation_session" not in st.session_state:
        try:
            session = create_translation_session(use_storage=True)
        except Exception as e:
            st.error(f"Failed to initialize translations: {e}")
            st.info("Configure SUPABASE_URL and SUPABASE_ANON_KEY (or GEMINI_API_KEY) in `.env`.")
            st.stop()
        run_async(session.start())
        st.session_state.translation_session = session
    return st.session_state.translation_session


def main():
    """Main application entry point."""
    session = get_session()

    st.sidebar.title("🌐 Cash Flow AI")
    st.sidebar.markdown("---")

    languages = list(Language)
    choice = st.sidebar.radio(
        session.t("common.language"),
        languages,
        index=languages.index(session.language),
        format_func=lambda lang: f"{lang.flag} {lang.display_name}",
    )
    if choice != session.language:
        run_async(session.set_language(choice))
        st.rerun()

    st.sidebar.markdown("---")

    pages = {
        "translate": session.t("translator.title"),
        "batch": session.t("translator.batchTitle"),
        "cache": session.t("translator.cacheTitle"),
        "settings": session.t("nav.settings"),
    }
    page = st.sidebar.radio(
        "Navigate to:",
        list(pages),
        format_func=lambda key: pages[key],
    )

    if page == "translate":
        render_translate_page(session)
    elif page == "batch":
        render_batch_page(session)
    elif page == "cache":
        render_cache_page(session)
    elif page == "settings":
        render_settings_page(session)


def _target_language_picker(session: TranslationSession, key: str) -> str:
    codes = list(LANGUAGE_NAMES)
    default = session.language.value if session.language != Language.EN else "es"
    return st.selectbox(
        session.t("translator.targetLanguage"),
        options=codes,
        index=codes.index(default),
        format_func=lambda code: f"{LANGUAGE_NAMES[code]} ({code})",
        key=key,
    )


def render_translate_page(session: TranslationSession):
    """Render the single-text translation page."""
    st.title(f"🔤 {session.t('translator.title')}")

    target = _target_language_picker(session, "single_target")
    text = st.text_area(session.t("translator.input"), height=150)

    if st.button(session.t("translator.translate"), type="primary", disabled=not text.strip()):
        with st.spinner(session.t("translator.translating")):
            translated = run_async(session.translate_to(text, target))

        st.markdown(f"### {session.t('translator.result')}")
        if translated == text:
            st.warning("The text came back unchanged. If this is unexpected, check the cache page for failures.")
        st.write(translated)


def render_batch_page(session: TranslationSession):
    """Render the batch translation page."""
    st.title(f"📚 {session.t('translator.batchTitle')}")

    target = _target_language_picker(session, "batch_target")
    raw = st.text_area(session.t("translator.batchInput"), height=200)
    texts = [line for line in raw.splitlines() if line.strip()]

    if st.button(session.t("translator.translate"), type="primary", disabled=not texts):
        with st.spinner(session.t("translator.translating")):
            translated = run_async(session.cache.translate_batch(texts, target))

        st.table([
            {"#": i + 1, "Original": original, LANGUAGE_NAMES.get(target, target): result}
            for i, (original, result) in enumerate(zip(texts, translated))
        ])


def render_cache_page(session: TranslationSession):
    """Render cache statistics and the audit trail of failures."""
    st.title(f"🗄️ {session.t('translator.cacheTitle')}")

    stats = session.stats
    col1, col2, col3, col4 = st.columns(4)
    col1.metric(session.t("translator.entries"), stats.size)
    col2.metric(session.t("translator.hitRate"), f"{stats.hit_rate:.0%}")
    col3.metric(session.t("translator.failures"), stats.failures)
    col4.metric(session.t("translator.evictions"), stats.evictions)

    limit = session.cache.max_entries
    st.caption(f"Capacity: {limit if limit else 'unbounded'} entries")

    if st.button(session.t("translator.clearCache")):
        run_async(session.clear_cache())
        st.success(session.t("translator.cacheCleared"))
        st.rerun()

    storage = session.audit_logger.storage
    if storage is None:
        st.info("Audit storage is disabled; failures only appear in the server log.")
        return

    st.markdown("---")
    st.markdown("### Audit Trail")

    counts = run_async(storage.count_by_type())
    if counts:
        st.bar_chart({event_type.value: count for event_type, count in counts.items()})

    events = run_async(storage.get_recent_events(limit=50))
    failures = [e for e in events if e.event_type == AuditEventType.TRANSLATION_FAILED]
    if failures:
        st.markdown("#### Recent failures")
        st.table([
            {
                "When": e.timestamp.strftime("%H:%M:%S"),
                "Languages": f"{e.details.get('source_language')} → {e.details.get('target_language')}",
                "Text": e.details.get("text_preview", ""),
                "Error": f"{e.error_code}: {e.error_message}",
            }
            for e in failures
        ])
    else:
        st.success("No failed translations in this session.")


def render_settings_page(session: TranslationSession):
    """Render the settings page."""
    st.title(f"⚙️ {session.t('nav.settings')}")

    st.markdown("### Connection Status")

    # Check services
    from cashflow_i18n.config import get_settings, validate_all_settings

    status = validate_all_settings()

    app_settings = get_settings().app
    st.caption(
        f"Environment: **{app_settings.app_environment}**"
        + (" · debug logging on" if app_settings.debug_mode else "")
    )

    services = [
        ("Translate edge function", "edge_function"),
        ("Gemini (direct translation)", "gemini"),
        ("Translation cache", "translation"),
    ]

    for name, key in services:
        if status.get(key, False):
            st.success(f"✅ {name} - Configured")
        else:
            error = status.get(f"{key}_error", "Not configured")
            st.error(f"❌ {name} - {error}")

    st.markdown(f"Active backend: **{session.cache.backend.name}**")

    st.markdown("---")
    st.markdown("### Configuration")
    st.markdown(
        "To configure the application, create a `.env` file with "
        "`SUPABASE_URL`, `SUPABASE_ANON_KEY` and optionally `GEMINI_API_KEY`. "
        "Set `TRANSLATION_BACKEND=gemini` to skip the edge function."
    )


if __name__ == "__main__":
    main()
