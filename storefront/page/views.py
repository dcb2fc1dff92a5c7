"""HTML fragments for the storefront page.

Every function here is pure: it maps its inputs to a markup string and has no
side effects. The Streamlit page writes the strings with ``unsafe_allow_html``,
so all product text is escaped.
"""
from __future__ import annotations

from html import escape
from typing import Sequence

from .state import Failed, Loaded, Loading, PageState
from .theme import Theme
from ..data.models import Product

SKELETON_COUNT = 8


def format_price(cents: int) -> str:
    """Format a price in minor units, e.g. ``1050`` -> ``"$10.50"``."""
    if cents < 0:
        raise ValueError(f"price must be non-negative, got {cents}")
    dollars, rest = divmod(cents, 100)
    return f"${dollars}.{rest:02d}"


def render_product_card(product: Product, theme: Theme, index: int = 0) -> str:
    name = escape(product.name)
    return (
        f'<div class="sf-card" data-product-id="{product.id}" '
        f'style="animation-delay: {index * 0.1:.1f}s">'
        f'<img src="{escape(product.image_url)}" alt="{name}" width="400" height="400" loading="lazy">'
        f'<div class="sf-card-body">'
        f'<h3 class="sf-card-title">{name}</h3>'
        f'<p class="sf-card-price">{format_price(product.price_in_cents)}</p>'
        f'</div>'
        f'<div class="sf-card-footer">'
        f'<button class="sf-button" type="button">{escape(theme.add_to_cart)}</button>'
        f'</div>'
        f'</div>'
    )


def render_product_skeleton() -> str:
    return (
        '<div class="sf-skeleton" aria-hidden="true">'
        '<div class="sf-bone sf-bone-image"></div>'
        '<div class="sf-bone sf-bone-title"></div>'
        '<div class="sf-bone sf-bone-price"></div>'
        '<div class="sf-bone sf-bone-button"></div>'
        '</div>'
    )


def render_skeleton_grid(count: int = SKELETON_COUNT) -> str:
    skeletons = "".join(render_product_skeleton() for _ in range(count))
    return f'<div class="sf-grid" aria-busy="true">{skeletons}</div>'


def render_product_grid(products: Sequence[Product], theme: Theme) -> str:
    cards = "".join(render_product_card(p, theme, i) for i, p in enumerate(products))
    return f'<div class="sf-grid">{cards}</div>'


def render_error(message: str, theme: Theme) -> str:
    return (
        '<div class="sf-error" role="alert">'
        f'<p>{escape(theme.error_prefix)}{escape(message)}</p>'
        '</div>'
    )


def render_products(state: PageState, theme: Theme) -> str:
    """Body of the products section for ``state``.

    Loading, loaded and failed views are mutually exclusive. An unmounted page
    renders an empty grid.
    """
    if isinstance(state, Loading):
        return render_skeleton_grid()
    if isinstance(state, Failed):
        return render_error(state.message, theme)
    if isinstance(state, Loaded):
        return render_product_grid(state.products, theme)
    return render_product_grid((), theme)


def render_hero(theme: Theme) -> str:
    return (
        '<section class="sf-hero">'
        f'<span class="sf-badge">{escape(theme.hero_badge)}</span>'
        f'<h1>{escape(theme.hero_title)}</h1>'
        f'<p>{escape(theme.hero_subtitle)}</p>'
        f'<button class="sf-button sf-cta" type="button">{escape(theme.hero_cta)}</button>'
        '</section>'
    )


def render_section_header(theme: Theme) -> str:
    return (
        '<div class="sf-section-head">'
        f'<h2>{escape(theme.section_title)}</h2>'
        f'<p>{escape(theme.section_subtitle)}</p>'
        '</div>'
    )


def render_footer(theme: Theme) -> str:
    return f'<footer class="sf-footer"><p>{escape(theme.footer)}</p></footer>'


def page_block(fragment: str, theme: Theme) -> str:
    """Wrap a page fragment in the themed container carrying the document language.

    Streamlit writes each markdown call as its own element, so every fragment
    gets its own container.
    """
    return f'<div class="sf-page" lang="{escape(theme.lang)}">{fragment}</div>'
