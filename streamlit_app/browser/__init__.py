"""
Single-page recipe browser core, independent of Streamlit.

This package contains:
- dom: Element tree pages mount into
- storage: Durable key-value storage (JSON files or SQL database)
- favorites: Favorites collection and write-through store
- search_controller: Query/pagination state machine
- scroll: Viewport model and the near-bottom proximity monitor
- components: Search form, recipe cards and the recipe list view
- pages: Search, Favorites and About pages
- router: Page switching with teardown
- runtime: Event loop thread hosting all of the above
"""
