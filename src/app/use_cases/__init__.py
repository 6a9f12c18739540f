"""Aggregate services"""
