"""Enrollment domain - enrollments, contracts and payments"""
