"""Basic SVG recoloring examples."""

from svgrecolor import SVGColorProcessor, parse, process_svg

OCEAN_BLUE = {
    "primary": "#003366",
    "secondary": "#0066CC",
    "accent": "#3399FF",
    "neutral": "#E6F2FF",
}
MONOCHROME = {
    "primary": "#000000",
    "secondary": "#666666",
    "accent": "#999999",
    "neutral": "#FFFFFF",
}

with open("logo.svg", encoding="utf-8") as f:
    svg_text = f.read()

# Example 1: One call, failures reported in the result
print("Example 1: process_svg")
outcome = process_svg(svg_text, OCEAN_BLUE)
if outcome.success:
    with open("logo-ocean.svg", "w", encoding="utf-8") as f:
        f.write(outcome.svg)
    print("Created logo-ocean.svg")
else:
    print(f"Cannot recolor: {outcome.errors}")

# Example 2: Parse once, recolor with several palettes
print("\nExample 2: Several palettes")
result = parse(svg_text)
print(f"Detected colors: {', '.join(result.colors)}")
for name, palette in [("ocean", OCEAN_BLUE), ("mono", MONOCHROME)]:
    print(f"{name}: {result.create_color_mapping(palette)}")
    with open(f"logo-{name}.svg", "w", encoding="utf-8") as f:
        f.write(result.replace_colors(palette))

# Example 3: Stateful processor with diagnostics
print("\nExample 3: SVGColorProcessor")
processor = SVGColorProcessor()
if not processor.parse("<div>Not an SVG</div>"):
    print(f"Errors: {processor.errors}")
