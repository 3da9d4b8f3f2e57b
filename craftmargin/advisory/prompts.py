# craftmargin/advisory/prompts.py
"""
Prompt builders for the advisory use cases.

Each builder returns a (system_prompt, user_prompt) pair whose user prompt
embeds the literal JSON shape the validator will enforce.
"""

from dataclasses import dataclass

from craftmargin.validation import sanitize_text

from .schemas import (
    BetterPriceParams,
    CompetitivePricingParams,
    MaterialPriceParams,
    ParseInputParams,
)

JSON_ONLY = "Respond with a single JSON object and nothing else."

COMPETITIVE_PRICING_SHAPE = """{
  "suggestions": ["suggestion1", "suggestion2", "suggestion3"],
  "priceRange": {"min": number, "max": number, "average": number},
  "insights": ["insight1", "insight2"]
}"""

MATERIAL_PRICE_SHAPE = """{
  "currentPrice": number,
  "priceRange": {"min": number, "max": number},
  "suppliers": ["supplier1", "supplier2"],
  "notes": "market conditions"
}"""

BETTER_PRICE_SHAPE = """{
  "foundBetterPrice": true | false,
  "suggestions": [
    {
      "supplier": "string",
      "price": number,
      "savings": number,
      "qualityNotes": "string",
      "shippingNotes": "string"
    }
  ],
  "totalPotentialSavings": number
}"""

PARSE_INPUT_SHAPE = """{
  "quantity": number,
  "productType": "string",
  "matchedProductId": "string or null",
  "dimensions": "string or null",
  "confidence": "high" | "medium" | "low"
}"""


@dataclass(frozen=True)
class PromptPair:
    """System and user prompt for one advisory call."""

    system_prompt: str
    user_prompt: str


def _money(value: float) -> str:
    return f"${value:.2f}"


def build_competitive_pricing_prompt(params: CompetitivePricingParams) -> PromptPair:
    """Material cost review plus market price range for a craft category."""
    category = sanitize_text(params.craft_category, "craft_category", max_length=100)

    lines = []
    total = 0.0
    for item in params.materials:
        name = sanitize_text(item.name, "material name", max_length=200)
        unit = sanitize_text(item.unit, "unit", max_length=50)
        lines.append(
            f"- {name}: {item.quantity:g} {unit} at {_money(item.cost_per_unit)}/{unit}"
            f" = {_money(item.total_cost)}"
        )
        total += item.total_cost

    description = ""
    if params.product_description:
        description = (
            "\nProduct: " + sanitize_text(params.product_description, "product_description") + "\n"
        )

    user_prompt = f"""As a pricing expert for handmade {category} products, analyze these material costs:
{description}
Materials:
{chr(10).join(lines)}

Total materials cost: {_money(total)}

Please provide:
1. 3 specific suggestions to reduce material costs
2. Estimated market price range for products using these materials
3. Competitive analysis insights

{JSON_ONLY} Use exactly this JSON format:
{COMPETITIVE_PRICING_SHAPE}"""

    return PromptPair(
        system_prompt=(
            "You are a market analyst for handmade goods. You know current Etsy and "
            "Shopify pricing for craft categories and give concrete, numeric pricing "
            "recommendations in JSON."
        ),
        user_prompt=user_prompt,
    )


def build_material_price_prompt(params: MaterialPriceParams) -> PromptPair:
    """Current market price and suppliers for one material."""
    name = sanitize_text(params.material_name, "material_name", max_length=200)
    category = sanitize_text(params.category, "category", max_length=100)

    known = []
    if params.current_price is not None:
        per_unit = f" per {sanitize_text(params.unit, 'unit', max_length=50)}" if params.unit else ""
        known.append(f"- Current price paid: {_money(params.current_price)}{per_unit}")
    if params.supplier:
        known.append(f"- Current supplier: {sanitize_text(params.supplier, 'supplier', max_length=200)}")
    known_block = ("\nWhat the maker pays today:\n" + "\n".join(known) + "\n") if known else ""

    user_prompt = f"""Find the current market price for "{name}" in the {category} category.
{known_block}
Include typical suppliers and the price range across them.

{JSON_ONLY} Use exactly this JSON format:
{MATERIAL_PRICE_SHAPE}"""

    return PromptPair(
        system_prompt=(
            "You are a procurement specialist helping handmade creators find better "
            "material prices. Compare suppliers and report prices as plain numbers."
        ),
        user_prompt=user_prompt,
    )


def build_better_price_prompt(params: BetterPriceParams) -> PromptPair:
    """Alternative suppliers that undercut what the maker pays for a material."""
    name = sanitize_text(params.material_name, "material_name", max_length=200)
    unit = sanitize_text(params.unit, "unit", max_length=50)
    supplier = (
        sanitize_text(params.supplier, "supplier", max_length=200) if params.supplier else "unknown"
    )
    category = ""
    if params.category:
        category = f"\n- Craft category: {sanitize_text(params.category, 'category', max_length=100)}"

    user_prompt = f"""Find better prices for this material:
- Material: {name}
- Current supplier: {supplier}
- Current price: {_money(params.current_price)} per {unit}{category}

Search for alternative suppliers and provide:
1. Suggested suppliers with better prices
2. Price per {unit} at each supplier
3. Savings per {unit} compared to the current price (0 if not cheaper)
4. Quality considerations
5. Shipping cost factors

Set foundBetterPrice to false and return an empty suggestions list if nothing is cheaper.

{JSON_ONLY} Use exactly this JSON format:
{BETTER_PRICE_SHAPE}"""

    return PromptPair(
        system_prompt=(
            "You are a procurement specialist helping handmade creators find better "
            "material prices. Search for alternative suppliers and compare prices."
        ),
        user_prompt=user_prompt,
    )


def build_parse_input_prompt(params: ParseInputParams) -> PromptPair:
    """Turn a natural-language material calculator request into structured fields."""
    user_input = sanitize_text(params.user_input, "user_input", max_length=1000)

    if params.saved_products:
        products = "\n".join(
            f"- {p.product_name} ({p.craft_category}) [id: {p.id}]" for p in params.saved_products
        )
    else:
        products = "(none)"

    user_prompt = f"""User input: "{user_input}"

User's saved products:
{products}

Parse the input and return:
1. Quantity requested
2. Product type/name
3. Matched product id from saved products (null if none match)
4. Dimensions (null if not provided)

{JSON_ONLY} Use exactly this JSON format:
{PARSE_INPUT_SHAPE}"""

    return PromptPair(
        system_prompt=(
            "You are an assistant helping makers calculate material quantities. Parse "
            "the user's natural language input and match it with their saved products."
        ),
        user_prompt=user_prompt,
    )
