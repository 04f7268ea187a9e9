"""Community domain - reviews, notifications and search history"""
