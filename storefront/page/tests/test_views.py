import re

import httpx
import pytest

from storefront.config import set_config_for_test
from storefront.data.backends.http_backend import HttpProductSource
from storefront.data.models import Product
from storefront.page.controller import PageController
from storefront.page.state import Failed, Idle, Loaded, Loading
from storefront.page.theme import DECORATED, PLAIN, get_theme
from storefront.page.views import (
    SKELETON_COUNT,
    format_price,
    page_block,
    render_error,
    render_footer,
    render_hero,
    render_product_card,
    render_products,
)

CARD = 'class="sf-card"'
SKELETON = 'class="sf-skeleton"'

def product(i, name=None, cents=100):
    return Product(id=i, name=name or f"P{i}", price_in_cents=cents, image_url=f"img/{i}.png")

def card_ids(html):
    return [int(i) for i in re.findall(r'data-product-id="(\d+)"', html)]

@pytest.mark.parametrize("cents, expected", [
    (1050, "$10.50"),
    (0, "$0.00"),
    (999, "$9.99"),
    (5, "$0.05"),
    (123456789, "$1234567.89"),
])
def test_format_price(cents, expected):
    assert format_price(cents) == expected

def test_format_price_rejects_negative():
    with pytest.raises(ValueError):
        format_price(-1)

def test_card_shows_image_name_price_and_button():
    html = render_product_card(product(1, "A", 500), PLAIN)
    assert '<img src="img/1.png" alt="A"' in html
    assert ">A</h3>" in html
    assert "$5.00" in html
    assert "Add to Cart" in html

def test_card_escapes_product_text():
    html = render_product_card(product(1, '<script>alert("x")</script>'), PLAIN)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html

def test_card_animation_is_staggered():
    assert "animation-delay: 0.3s" in render_product_card(product(1), PLAIN, index=3)

@pytest.mark.parametrize("theme", [PLAIN, DECORATED])
def test_loading_renders_fixed_skeleton_count(theme):
    html = render_products(Loading(), theme)
    assert html.count(SKELETON) == SKELETON_COUNT == 8
    assert CARD not in html

@pytest.mark.parametrize("count", [0, 1, 8, 25])
def test_one_card_per_product_in_order(count):
    products = tuple(product(100 - i) for i in range(count))
    html = render_products(Loaded(products), PLAIN)
    assert html.count(CARD) == count
    assert card_ids(html) == [p.id for p in products]
    assert SKELETON not in html

def test_error_view_excludes_grid():
    html = render_products(Failed("Failed to fetch products"), DECORATED)
    assert 'role="alert"' in html
    assert "💔 載入商品時發生錯誤：Failed to fetch products" in html
    assert CARD not in html
    assert SKELETON not in html

def test_error_message_is_escaped():
    assert "&lt;b&gt;" in render_error("<b>", PLAIN)

def test_idle_renders_empty_grid():
    html = render_products(Idle(), PLAIN)
    assert CARD not in html and SKELETON not in html

def test_page_sections_use_theme_copy():
    assert DECORATED.hero_title in render_hero(DECORATED)
    assert "Vibe Store" in render_footer(PLAIN)
    assert DECORATED.stylesheet.startswith("<style>")

def test_get_theme():
    assert get_theme("plain") is PLAIN
    assert get_theme("decorated") is DECORATED
    with pytest.raises(ValueError):
        get_theme("neon")

# ---- end to end: mocked endpoint -> controller -> markup ----

@pytest.fixture
def page():
    set_config_for_test(api_base_url="http://test")

    def build(response):
        source = HttpProductSource(transport=httpx.MockTransport(lambda request: response))
        controller = PageController(source)
        rendered = []
        controller.subscribe(lambda state: rendered.append(render_products(state, PLAIN)))
        controller.load(controller.mount())
        return controller, rendered

    yield build
    set_config_for_test()

def test_scenario_single_product(page):
    body = [{"id": 1, "name": "A", "price_in_cents": 500, "image_url": "x"}]
    controller, rendered = page(httpx.Response(200, json=body))
    loading_html, settled_html = rendered
    assert loading_html.count(SKELETON) == 8
    assert not controller.loading
    assert settled_html.count(CARD) == 1
    assert ">A</h3>" in settled_html
    assert "$5.00" in settled_html

def test_scenario_server_error(page):
    controller, rendered = page(httpx.Response(500))
    assert not controller.loading
    assert controller.products == ()
    assert 'role="alert"' in rendered[-1]
    assert rendered[-1].count(CARD) == 0

def test_scenario_malformed_body(page):
    controller, rendered = page(httpx.Response(200, content=b"<html>"))
    assert controller.error is not None
    assert 'role="alert"' in rendered[-1]

@pytest.mark.parametrize("theme, lang", [(PLAIN, "en"), (DECORATED, "zh-TW")])
def test_page_block_carries_document_language(theme, lang):
    html = page_block(render_hero(theme), theme)
    assert html.startswith(f'<div class="sf-page" lang="{lang}">')
    assert html.endswith("</section></div>")
