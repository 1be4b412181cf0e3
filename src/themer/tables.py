"""Static lookup tables used to classify theme keys.

Every table here is read-only and shared by all transformer invocations.
"""

from __future__ import annotations

# Canonical (camelCase) theme key -> CSS property name.
CSS_PROPERTIES: dict[str, str] = {
    "alignContent": "align-content",
    "alignItems": "align-items",
    "alignSelf": "align-self",
    "background": "background",
    "backgroundAttachment": "background-attachment",
    "backgroundColor": "background-color",
    "backgroundImage": "background-image",
    "backgroundOrigin": "background-origin",
    "backgroundPosition": "background-position",
    "backgroundPositionX": "background-position-x",
    "backgroundPositionY": "background-position-y",
    "backgroundRepeat": "background-repeat",
    "backgroundSize": "background-size",
    "border": "border",
    "borderBottom": "border-bottom",
    "borderBottomColor": "border-bottom-color",
    "borderColor": "border-color",
    "borderLeft": "border-left",
    "borderLeftColor": "border-left-color",
    "borderRadius": "border-radius",
    "borderRight": "border-right",
    "borderRightColor": "border-right-color",
    "borderStyle": "border-style",
    "borderTop": "border-top",
    "borderTopColor": "border-top-color",
    "borderWidth": "border-width",
    "bottom": "bottom",
    "boxShadow": "box-shadow",
    "boxSizing": "box-sizing",
    "breakAfter": "break-after",
    "breakBefore": "break-before",
    "breakInside": "break-inside",
    "clear": "clear",
    "clip": "clip",
    "clipPath": "clip-path",
    "color": "color",
    "columnFill": "column-fill",
    "columnGap": "column-gap",
    "columnRule": "column-rule",
    "columnSpan": "column-span",
    "columnWidth": "column-width",
    "columns": "columns",
    "content": "content",
    "cursor": "cursor",
    "direction": "direction",
    "display": "display",
    "filter": "filter",
    "flex": "flex",
    "flexBasis": "flex-basis",
    "flexDirection": "flex-direction",
    "flexGrow": "flex-grow",
    "flexShrink": "flex-shrink",
    "flexWrap": "flex-wrap",
    "float": "float",
    "font": "font-family",  # shorthand alias, not the CSS `font` shorthand
    "fontFamily": "font-family",
    "fontSize": "font-size",
    "fontSizeAdjust": "font-size-adjust",
    "fontStretch": "font-stretch",
    "fontStyle": "font-style",
    "fontWeight": "font-weight",
    "grid": "grid",
    "gridGap": "grid-gap",
    "gridRow": "grid-row",
    "gridTemplate": "grid-template",
    "height": "height",
    "justifyContent": "justify-content",
    "left": "left",
    "letterSpacing": "letter-spacing",
    "lineHeight": "line-height",
    "listStyle": "list-style",
    "markerOffset": "marker-offset",
    "margin": "margin",
    "marginBottom": "margin-bottom",
    "marginLeft": "margin-left",
    "marginRight": "margin-right",
    "marginTop": "margin-top",
    "maxHeight": "max-height",
    "maxWidth": "max-width",
    "minHeight": "min-height",
    "minWidth": "min-width",
    "opacity": "opacity",
    "order": "order",
    "outline": "outline",
    "overflow": "overflow",
    "overflowWrap": "overflow-wrap",
    "overflowX": "overflow-x",
    "overflowY": "overflow-y",
    "padding": "padding",
    "paddingBottom": "padding-bottom",
    "paddingLeft": "padding-left",
    "paddingRight": "padding-right",
    "paddingTop": "padding-top",
    "pageBreakAfter": "page-break-after",
    "pageBreakBefore": "page-break-before",
    "pointerEvents": "pointer-events",
    "position": "position",
    "quotes": "quotes",
    "right": "right",
    "textAlign": "text-align",
    "textDecoration": "text-decoration",
    "textIndent": "text-indent",
    "textShadow": "text-shadow",
    "textTransform": "text-transform",
    "textOverflow": "text-overflow",
    "top": "top",
    "transition": "transition",
    "transform": "transform",
    "verticalAlign": "vertical-align",
    "visibility": "visibility",
    "webkitAppearance": "-webkit-appearance",
    "whiteSpace": "white-space",
    "width": "width",
    "wordSpacing": "word-spacing",
    "wordWrap": "word-wrap",
    "zIndex": "z-index",
}

# CSS properties whose bare, non-zero numeric values get a length unit.
PIXEL_PROPERTIES = frozenset({
    "border-radius",
    "bottom",
    "column-width",
    "font-size",
    "height",
    "left",
    "letter-spacing",
    "margin",
    "margin-bottom",
    "margin-left",
    "margin-right",
    "margin-top",
    "max-height",
    "max-width",
    "min-height",
    "min-width",
    "padding",
    "padding-bottom",
    "padding-left",
    "padding-right",
    "padding-top",
    "right",
    "text-indent",
    "top",
    "width",
})

# Canonical theme key -> pseudo-class (or pseudo-element) name.
CSS_PSEUDO_CLASSES: dict[str, str] = {
    "active": "active",
    "after": "after",
    "before": "before",
    "checked": "checked",
    "disabled": "disabled",
    "empty": "empty",
    "enabled": "enabled",
    "firstChild": "first-child",
    "firstOfType": "first-of-type",
    "focus": "focus",
    "hover": "hover",
    "inRange": "in-range",
    "invalid": "invalid",
    "lang": "lang",
    "lastChild": "last-child",
    "lastOfType": "last-of-type",
    "link": "link",
    "not": "not",
    "nthChild": "nth-child",
    "nthLastChild": "nth-last-child",
    "nthLastOfType": "nth-last-of-type",
    "nthOfType": "nth-of-type",
    "onlyOfType": "only-of-type",
    "onlyChild": "only-child",
    "optional": "optional",
    "outOfRange": "out-of-range",
    "readOnly": "read-only",
    "readWrite": "read-write",
    "required": "required",
    "root": "root",
    "target": "target",
    "valid": "valid",
    "visited": "visited",
    "firstLetter": "first-letter",
    "firstLine": "first-line",
    "selection": "selection",
}

# Vendor-prefixed placeholder selectors; a ``placeholder`` block is
# mirrored into each of these in order.
PLACEHOLDER_SELECTORS: tuple[str, ...] = (
    ":-moz-placeholder",
    ":-ms-input-placeholder",
    "::-moz-placeholder",
    "::-webkit-input-placeholder",
)

# Reserved keys for the keyword-matched categories (compared lowercased).
PLACEHOLDER_KEY = "placeholder"
MODIFIER_CLASS_KEY = "class"
CHILD_SELECTOR_KEY = "child"
KEYFRAMES_KEY = "keyframes"
KEYFRAMES_IDENT_KEY = "ident"
