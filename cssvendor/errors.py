__all__ = ["CSSVendorError", "ConfigError", "FilterError"]

class CSSVendorError(Exception): pass
class ConfigError(CSSVendorError): pass
class FilterError(CSSVendorError): pass
