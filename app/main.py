import sys
import os
import logging
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pricing.factory import BasketFactory
from Checkout_Service.receipt import (
    basket_summary,
    format_money,
    render_receipt,
    run_scenarios,
    scenarios_report,
)

SEED_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "seed.json")

logging.basicConfig(
    level=os.environ.get("BASKET_LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ============ Фабрика ============
@st.cache_resource
def get_factory():
    if os.path.exists(SEED_PATH):
        return BasketFactory.from_config(SEED_PATH)
    return BasketFactory()


# ============ Инициализация ============
st.set_page_config(
    page_title="Acme Widget Co: Basket",
    page_icon="🛒",
    layout="wide",
)

factory = get_factory()
catalog = factory.catalog

if "basket" not in st.session_state:
    st.session_state.basket = factory.create_basket()


st.title("🛒 Acme Widget Co")
st.caption("Basket pricing: catalog → offers → delivery")

with st.sidebar:
    st.header("📂 Навигация")
    page = st.radio(
        "Раздел:",
        ["🧪 Сценарии", "🛒 Корзина", "🏪 Каталог", "🏷️ Офферы"],
        label_visibility="collapsed",
    )


# ============ PAGE: СЦЕНАРИИ ============
if page == "🧪 Сценарии":
    st.header("🧪 Демо-сценарии")

    results = run_scenarios(factory)
    stats = scenarios_report(results)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Всего", stats["total"])
    with col2:
        st.metric("✅ Прошло", stats["passed"])
    with col3:
        st.metric("❌ Упало", stats["failed"])

    st.divider()

    for idx, r in enumerate(results, 1):
        cols = st.columns([4, 2, 2, 1])
        with cols[0]:
            st.write(f"**Test Case {idx}**: {', '.join(r['products'])}")
        with cols[1]:
            st.write(f"Рассчитано: {format_money(r['total'])}")
        with cols[2]:
            st.write(f"Ожидалось: {format_money(r['expected'])}")
        with cols[3]:
            st.write("✅ PASS" if r["passed"] else "❌ FAIL")


# ============ PAGE: КОРЗИНА ============
elif page == "🛒 Корзина":
    st.header("🛒 Корзина")

    basket = st.session_state.basket

    col1, col2 = st.columns([3, 1])
    with col1:
        code = st.text_input("Код товара:", key="basket_code")
    with col2:
        st.write("")
        if st.button("➕ Добавить", type="primary", key="basket_add") and code:
            result = basket.try_add(code.strip().upper())
            if result.is_right:
                st.success(f"✅ {code.upper()} добавлен")
            else:
                st.error(f"❌ {result.value['error']}")
                st.caption(f"Доступные коды: {', '.join(catalog.get_all_products())}")

    quick = st.columns(len(catalog) or 1)
    for col, product in zip(quick, catalog):
        with col:
            if st.button(f"{product.code} · {format_money(product.price)}", key=f"quick_{product.code}"):
                basket.add(product.code)

    st.divider()

    summary = basket_summary(basket)
    if basket.is_empty:
        st.info("🛍️ Корзина пуста")
    else:
        for item in summary["items"]:
            cols = st.columns([5, 2, 2])
            with cols[0]:
                st.write(f"**{item['name']}** ({item['code']})")
            with cols[1]:
                st.write(f"× {item['quantity']}")
            with cols[2]:
                st.write(format_money(item["line_total"]))

        for offer in summary["offers"]:
            st.write(f"🏷️ {offer['description']}: −{format_money(offer['discount'])}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Сумма", format_money(summary["subtotal"]))
    with col2:
        st.metric("Доставка", format_money(summary["delivery"]))
    with col3:
        st.metric("💰 Итого", format_money(summary["total"]))

    with st.expander("🧾 Чек"):
        st.code(render_receipt(summary), language="text")

    if st.button("🗑️ Очистить", key="basket_clear"):
        basket.clear()
        st.rerun()


# ============ PAGE: КАТАЛОГ ============
elif page == "🏪 Каталог":
    st.header("🏪 Каталог")

    for product in catalog:
        cols = st.columns([2, 5, 2])
        with cols[0]:
            st.write(f"`{product.code}`")
        with cols[1]:
            st.write(f"**{product.name}**")
        with cols[2]:
            st.write(format_money(product.price))

    st.divider()
    st.markdown("##### Поиск товара")
    query = st.text_input("Код:", "R01", key="catalog_search")
    found = catalog.find_product(query)
    if found.is_some():
        p = found.get_or_else(None)
        st.success(f"✅ {p.name}: {format_money(p.price)}")
    else:
        st.warning(f"❌ Товар `{query}` не найден (коды регистрозависимые)")


# ============ PAGE: ОФФЕРЫ ============
elif page == "🏷️ Офферы":
    st.header("🏷️ Офферы и доставка")

    if not factory.offers:
        st.info("Офферов нет")
    for offer in factory.offers:
        st.write(f"• {offer.describe()}")

    st.divider()
    st.subheader("🚚 Тарифы доставки")
    for tier in getattr(factory.delivery_calculator, "tiers", ()):
        st.write(f"от {format_money(tier.threshold)}: {format_money(tier.cost)}")
