"""Live interface context for direction-aware geometry.

Two values matter to every box computation:

1. **Layout direction** - resolves LEADING/TRAILING properties and abstract
   anchors to LEFT/RIGHT, and flips ``advance`` offsets.
2. **Tolerance** - default for near-equality of points, sizes and boxes.

Pixel scale and screen size are read by unit conversion only.

## Usage

```python
from viewbox.interface import InterfaceService

service = InterfaceService.get_instance()
service.update_for_language("he")   # locale changed
service.update(pixel_scale=3.0)     # display changed
```
"""

from .service import InterfaceService, get_interface
from .types import RTL_LANGUAGES, LayoutDirection, ScreenMetrics

__all__ = [
    "InterfaceService",
    "get_interface",
    "LayoutDirection",
    "ScreenMetrics",
    "RTL_LANGUAGES",
]
