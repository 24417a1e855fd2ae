"""
Utility modules for robotlang
"""
