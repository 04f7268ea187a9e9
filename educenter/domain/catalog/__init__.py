"""Catalog domain - courses and tags"""
