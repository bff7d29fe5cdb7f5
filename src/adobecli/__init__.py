"""
Adobe AEM command-line client.
"""
