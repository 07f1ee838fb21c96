# Services package init
"""
Recordbook — Services Layer
============================

What:  Everything between the routes (HTTP) and the disk.

Service Inventory:
    - slug.py:          slugify(), title → storage key
    - record_store.py:  RecordStore, one JSON file per record
    - renderer.py:      TemplateRenderer, named Jinja2 views

Routes receive the store and renderer through FastAPI dependencies
(get_record_store, get_renderer) so tests can swap them out.
"""
