"""
ターゲット別スクリプトビルダー
"""

from .cypress import CypressScriptBuilder
from .eventstream import EventstreamScriptBuilder
from .playwright_java import PlaywrightJavaScriptBuilder
from .playwright_js import PlaywrightJSScriptBuilder
from .playwright_python import PlaywrightPythonScriptBuilder
from .puppeteer import PuppeteerScriptBuilder

__all__ = [
    "CypressScriptBuilder",
    "EventstreamScriptBuilder",
    "PlaywrightJSScriptBuilder",
    "PlaywrightJavaScriptBuilder",
    "PlaywrightPythonScriptBuilder",
    "PuppeteerScriptBuilder",
]
