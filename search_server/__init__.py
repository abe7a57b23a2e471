"""Search Server - in-memory TF-IDF document search with an HTTP API"""
