# ui/examples.py
from typing import Dict, List, Optional

from models import ExampleEntry

EXAMPLES: Dict[str, ExampleEntry] = {
    entry.label: entry for entry in [
        ExampleEntry(
            label="Protein Bar",
            text="Protein Blend (Whey Protein Isolate, Milk Protein Isolate), Soluble Corn Fiber, Almonds, "
                 "Water, Erythritol, Natural Flavors, Palm Kernel Oil, Sea Salt, Calcium Carbonate, "
                 "Sucralose, Steviol Glycosides",
        ),
        ExampleEntry(
            label="Breakfast Cereal",
            text="Whole Grain Oats, Sugar, Corn Syrup, Modified Corn Starch, Honey, Salt, "
                 "Tripotassium Phosphate, Natural Flavor, Vitamin E, Iron, Vitamin A, Vitamin B6, "
                 "Vitamin B2, Vitamin B1, Folic Acid, Vitamin B12, Vitamin D3",
        ),
        ExampleEntry(
            label="Yogurt",
            text="Cultured Pasteurized Nonfat Milk, Sugar, Modified Corn Starch, Strawberries, "
                 "Contains 1% or less of: Kosher Gelatin, Natural Flavor, Citric Acid, "
                 "Tricalcium Phosphate, Pectin, Acesulfame Potassium, Sucralose, Red 40, Vitamin D3",
        ),
    ]
}

def example_names() -> List[str]:
    return list(EXAMPLES.keys())

def get_example(name: str) -> Optional[ExampleEntry]:
    return EXAMPLES.get(name)
