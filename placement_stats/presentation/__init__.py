"""
Presentation Helpers

Display formatting and text rendering for computed statistics.
Nothing here changes the underlying numbers.
"""
