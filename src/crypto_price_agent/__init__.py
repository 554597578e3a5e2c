"""CryptoPrice agent: character definition plus the starter plugin.

Example:
    >>> from crypto_price_agent.plugin.starter import build_plugin
    >>> await runtime.register_plugin(build_plugin())
"""

__version__ = "0.1.0"
