import streamlit as st

from storefront.config import get_config
from storefront.data.util import get_product_source
from storefront.logging import get_logger
from storefront.page.controller import PageController
from storefront.page.theme import get_theme
from storefront.page.views import (
    page_block,
    render_footer,
    render_hero,
    render_products,
    render_section_header,
)

config = get_config()
theme = get_theme(config.theme)
logger = get_logger(__name__)

st.set_page_config(
    page_title=theme.title,
    layout="wide",
    menu_items={"About": theme.description},
)
st.markdown(theme.stylesheet, unsafe_allow_html=True)


def write_block(fragment: str, slot=st) -> None:
    slot.markdown(page_block(fragment, theme), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Hero
# -----------------------------------------------------------------------------
write_block(render_hero(theme))

# -----------------------------------------------------------------------------
# Products: skeletons while the request is in flight, then grid or error
# -----------------------------------------------------------------------------
write_block(render_section_header(theme))
products_slot = st.empty()

controller = PageController(get_product_source())
controller.subscribe(lambda state: write_block(render_products(state, theme), products_slot))
token = controller.mount()
controller.load(token)
logger.debug(f"Rendered product page in state {type(controller.state).__name__}")

# -----------------------------------------------------------------------------
# Footer
# -----------------------------------------------------------------------------
write_block(render_footer(theme))
