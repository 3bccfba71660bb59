"""
Static UI strings shipped with the application.

Dynamic content (transaction descriptions, AI answers, blog text) goes
through the translation cache; fixed labels live here.
"""

STATIC_STRINGS: dict[str, dict] = {
    "en": {
        "common": {
            "save": "Save",
            "cancel": "Cancel",
            "delete": "Delete",
            "edit": "Edit",
            "search": "Search",
            "export": "Export",
            "loading": "Loading...",
            "error": "Error",
            "success": "Success",
            "confirm": "Confirm",
            "close": "Close",
            "clear": "Clear",
            "language": "Language",
        },
        "nav": {
            "dashboard": "Dashboard",
            "transactions": "Transactions",
            "reports": "Reports",
            "settings": "Settings",
            "admin": "Admin",
        },
        "translator": {
            "title": "Translate",
            "batchTitle": "Batch Translate",
            "cacheTitle": "Translation Cache",
            "input": "Text to translate",
            "batchInput": "One text per line",
            "targetLanguage": "Target language",
            "translate": "Translate",
            "translating": "Translating...",
            "result": "Translation",
            "clearCache": "Clear cache",
            "cacheCleared": "Translation cache cleared",
            "entries": "Cached entries",
            "hitRate": "Hit rate",
            "failures": "Failed translations",
            "evictions": "Evictions",
        },
    },
    "es": {
        "common": {
            "save": "Guardar",
            "cancel": "Cancelar",
            "delete": "Eliminar",
            "edit": "Editar",
            "search": "Buscar",
            "export": "Exportar",
            "loading": "Cargando...",
            "error": "Error",
            "success": "Éxito",
            "confirm": "Confirmar",
            "close": "Cerrar",
            "clear": "Limpiar",
            "language": "Idioma",
        },
        "nav": {
            "dashboard": "Panel",
            "transactions": "Transacciones",
            "reports": "Informes",
            "settings": "Configuración",
            "admin": "Administración",
        },
        "translator": {
            "title": "Traducir",
            "batchTitle": "Traducción por lotes",
            "cacheTitle": "Caché de traducciones",
            "input": "Texto a traducir",
            "batchInput": "Un texto por línea",
            "targetLanguage": "Idioma de destino",
            "translate": "Traducir",
            "translating": "Traduciendo...",
            "result": "Traducción",
            "clearCache": "Limpiar caché",
            "cacheCleared": "Caché de traducciones limpiada",
            "entries": "Entradas en caché",
            "hitRate": "Tasa de aciertos",
            "failures": "Traducciones fallidas",
            "evictions": "Expulsiones",
        },
    },
}


def lookup(language: str, key: str):
    """Resolve a dotted key in one language table, or None."""
    node = STATIC_STRINGS.get(language)
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None
