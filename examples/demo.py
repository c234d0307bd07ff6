"""Demo script: build a radar chart, edit its items, and render it."""

import logging
from pathlib import Path

from radarplot import ChildCollection, ItemDescriptor, RadarChart

OUTPUT = Path(__file__).resolve().parent / "radar.png"


def main():
    logging.basicConfig(level=logging.DEBUG)

    items = ChildCollection([
        ItemDescriptor("Warrior", {"str": 90, "dex": 40, "int": 15, "wis": 30, "cha": 50}),
        ItemDescriptor("Rogue", {"str": 35, "dex": 95, "int": 55, "wis": 40, "cha": 70}),
    ])
    chart = RadarChart(
        items,
        dimensions="str:Strength,dex:Dexterity,int:Intellect,wis:Wisdom,cha:Charisma",
        steps="5",
        size="400",
    )
    print(f"Dimensions: {[d.label for d in chart.dimensions]}")

    with items.batch():
        items.append(ItemDescriptor("Mage", {"int": "95", "wis": "80"}, color="purple"))
        items[0].set_value("cha", 65)
    print(f"Items: {[i.label for i in chart.items]}")

    chart.render_mpl(OUTPUT, show=False)
    print(f"Rendered to {OUTPUT}")
    chart.disconnect()


if __name__ == "__main__":
    main()
