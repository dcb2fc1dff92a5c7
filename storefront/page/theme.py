"""Visual variants of the storefront page.

Both variants render through the same view functions; a Theme only supplies
copy and CSS.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

BASE_CSS = """
.sf-page { font-family: "Nunito", "Inter", sans-serif; }
.sf-hero { text-align: center; padding: 4rem 1rem; }
.sf-hero h1 { font-size: 3rem; margin-bottom: 1rem; }
.sf-section-head { text-align: center; margin: 3rem 0 2rem; }
.sf-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 2rem; }
.sf-card { border-radius: 0.75rem; overflow: hidden; background: #fff; }
.sf-card img { width: 100%; aspect-ratio: 1 / 1; object-fit: cover; }
.sf-card-body { padding: 1.5rem; }
.sf-card-footer { padding: 0 1.5rem 1.5rem; }
.sf-button { width: 100%; padding: 0.75rem; border: 0; border-radius: 0.75rem; font-weight: 600; }
.sf-skeleton { border-radius: 0.75rem; overflow: hidden; }
.sf-bone { background: #e5e7eb; border-radius: 0.5rem; animation: sf-pulse 1.5s ease-in-out infinite; }
.sf-bone-image { aspect-ratio: 1 / 1; width: 100%; border-radius: 0; }
.sf-bone-title { height: 1.5rem; width: 75%; margin: 1.5rem 1.5rem 0.75rem; }
.sf-bone-price { height: 2rem; width: 50%; margin: 0 1.5rem 1.5rem; }
.sf-bone-button { height: 3rem; margin: 0 1.5rem 1.5rem; }
.sf-error { text-align: center; padding: 3rem 0; }
.sf-error p { display: inline-block; padding: 2rem; border-radius: 1rem; }
.sf-footer { text-align: center; padding: 4rem 1rem; opacity: 0.6; }
@keyframes sf-pulse { 50% { opacity: 0.5; } }
"""


@dataclass(frozen=True)
class Theme:
    name: str
    lang: str
    title: str
    description: str
    hero_badge: str
    hero_title: str
    hero_subtitle: str
    hero_cta: str
    section_title: str
    section_subtitle: str
    add_to_cart: str
    error_prefix: str
    footer: str
    css: str = ""

    @property
    def stylesheet(self) -> str:
        return f"<style>{BASE_CSS}{self.css}</style>"


PLAIN = Theme(
    name="plain",
    lang="en",
    title="Vibe Store",
    description="Browse our featured products",
    hero_badge="Featured",
    hero_title="Discover Something New",
    hero_subtitle="Carefully selected products for everyday life.",
    hero_cta="Start Shopping",
    section_title="Popular Products",
    section_subtitle="Every product is hand-picked for quality.",
    add_to_cart="Add to Cart",
    error_prefix="Error loading products: ",
    footer="© 2024 Vibe Store. All rights reserved.",
    css="""
.sf-card { border: 1px solid #e5e7eb; }
.sf-button { background: #111827; color: #fff; }
.sf-error p { background: #fef2f2; color: #b91c1c; }
""",
)

DECORATED = Theme(
    name="decorated",
    lang="zh-TW",
    title="Vibe Store - 少女風格精品店",
    description="探索美好生活的少女風格精品購物網站",
    hero_badge="✨ 精選商品 ✨",
    hero_title="💖 探索美好生活 💖",
    hero_subtitle="精心挑選的優質商品，為您的生活增添更多色彩與品味 🌸",
    hero_cta="🛍️ 開始購物 ✨",
    section_title="🌟 熱門商品 🌟",
    section_subtitle="每一件商品都經過精心挑選，品質保證 💎",
    add_to_cart="💕 加入購物車 💕",
    error_prefix="💔 載入商品時發生錯誤：",
    footer="© 2024 Vibe Store. 為您帶來美好的購物體驗 💕",
    css="""
.sf-page { font-family: "Nunito", sans-serif; }
.sf-hero { background: linear-gradient(135deg, #fdf2f8cc, #faf5ffcc); }
.sf-hero h1, .sf-section-head h2 { font-family: "Dancing Script", cursive; color: #db2777; }
.sf-badge { background: #fbcfe8b3; color: #9d174d; padding: 0.5rem 1rem; border-radius: 9999px; }
.sf-card { border: 2px solid #fbcfe880; transition: all 0.3s; animation: sf-float 3s ease-in-out infinite; }
.sf-card:hover { transform: translateY(-0.5rem); box-shadow: 0 10px 25px #f9a8d455; }
.sf-button { background: linear-gradient(90deg, #f472b6, #c084fc); color: #fff; }
.sf-bone { background: #fce7f380; }
.sf-error p { background: #fce7f3cc; border: 1px solid #f9a8d480; color: #be185d; }
@keyframes sf-float { 50% { transform: translateY(-4px); } }
""",
)

THEMES: Dict[str, Theme] = {t.name: t for t in (PLAIN, DECORATED)}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None
