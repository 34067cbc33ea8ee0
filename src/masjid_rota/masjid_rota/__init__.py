"""Masjid rota package.

Organized by feature modules (workers, shifts, prayers, breaks) with a thin
Flask controller layer over service and repository layers.
"""
