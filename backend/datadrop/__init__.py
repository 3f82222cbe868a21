"""Datadrop: serve a directory over HTTP and accept base64 JSON uploads into it."""
