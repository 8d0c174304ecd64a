"""
Core: storage/terminal ports and the action dispatcher.
"""
