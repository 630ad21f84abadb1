import promise_tracker.bootstrap_env  # must be first to set env/secrets
import asyncio
import logging

import streamlit as st

from promise_tracker.config import TABS, get_settings
from promise_tracker.dashboard import DashboardModel
from promise_tracker.data.loader import load_dataset
from promise_tracker.data.records import Dataset
from promise_tracker.errors import LoadFailure
from promise_tracker.log import configure_logging
from promise_tracker.ui.components.formatting import escape_markdown
from promise_tracker.ui.layout import setup_page
from promise_tracker.ui.pages import data_quality, tracker
from promise_tracker.ui.pages.context import PageContext

log = logging.getLogger("promise_tracker.app")

PAGE_RENDERERS = {
    "tracker": tracker.render,
    "data_quality": data_quality.render,
}


@st.cache_data(show_spinner=False, ttl=600)
def load_data(source: str) -> Dataset:
    """Cached by source; the only await in the session happens here."""
    return asyncio.run(load_dataset(source, get_settings()))


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    setup_page()

    if st.sidebar.button("🔄 Refresh Data"):
        load_data.clear()  # type: ignore[attr-defined]

    try:
        dataset = load_data(settings.data_source)
    except LoadFailure as exc:
        log.error("Dashboard not rendered: %s", exc)
        st.error("Error loading site data. Check data.json formatting.")
        st.stop()

    model = DashboardModel.from_dataset(dataset, settings.score_scale_factor)
    st.title(escape_markdown(model.title), anchor=False)

    context = PageContext(model=model, settings=settings)
    streamlit_tabs = st.tabs([tab.label for tab in TABS])
    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
