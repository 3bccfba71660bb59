"""
Cash Flow AI - Translation Layer

Client-side translation for the Cash Flow AI bookkeeping app:
a session-scoped translation cache in front of the hosted translate
function, plus the UI language context that drives it.

DESIGN PRINCIPLES:
1. One remote call per distinct (source, target, text) per session
2. Translation failures degrade to the original text, never to an error
3. Every failure is visible in the audit trail
4. No global state - each UI session owns its cache
"""

__version__ = "1.0.0"
__author__ = "Cash Flow AI Team"
