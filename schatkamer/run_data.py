from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ConsentData:
    present: bool = False
    available_actions: set[str] = field(default_factory=set)   # {'refuse', 'accept'}
    action: Optional[str] = None                                # co kliknął gate


@dataclass
class FlyoutData:
    media_visible: bool = False
    personen_visible: bool = False
    advanced_link_visible: bool = False
    media_count: int = 0
    omroep_count: int = 0
    personen_count: int = 0

    @property
    def opened(self) -> bool:
        return self.media_visible or self.personen_visible or self.advanced_link_visible


@dataclass
class PaginationData:
    visible: bool = False
    first_result: Optional[str] = None
    url: Optional[str] = None


@dataclass
class LinkSample:
    aria_label: Optional[str] = None
    text: Optional[str] = None

    @property
    def accessible_name(self) -> Optional[str]:
        return self.aria_label or (self.text or '').strip() or None


@dataclass
class A11yData:
    # None = nie zbierane w tym teście, rules pomijają
    links:             Optional[list[LinkSample]]     = None
    image_alts:        Optional[list[Optional[str]]]  = None
    button_boxes:      Optional[list[Optional[dict]]] = None
    focused_tags:      Optional[list[str]]            = None
    h1_count:          Optional[int] = None
    body_scroll_width: Optional[int] = None
    viewport_width:    Optional[int] = None
    lang:              Optional[str] = None
