from selectorkit.objects.serialization import from_json, to_json
from selectorkit.objects.shapes import Rectangle

__all__ = ["Rectangle", "from_json", "to_json"]
