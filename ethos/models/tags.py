"""Recognized cause tags."""

from enum import Enum


class TagKey(str, Enum):
    """Closed set of causes a company can be evaluated against."""

    FREE_PALESTINE = "free_palestine"
    JUSTICE_FOR_UKRAINE = "justice_for_ukraine"
    WOMEN_WORKPLACE = "women_workplace"
    CHILD_LABOUR = "child_labour"
    LGBTQ = "lgbtq"
    ANIMAL_CRUELTY = "animal_cruelty"
    ENVIRONMENTALLY_FRIENDLY = "environmentally_friendly"
    ETHICAL_SOURCING = "ethical_sourcing"
    DATA_PRIVACY = "data_privacy"


TAG_NAMES: dict[TagKey, str] = {
    TagKey.FREE_PALESTINE: "Free Palestine",
    TagKey.JUSTICE_FOR_UKRAINE: "Justice for Ukraine",
    TagKey.WOMEN_WORKPLACE: "Women in the workplace",
    TagKey.CHILD_LABOUR: "Against Child Labour",
    TagKey.LGBTQ: "LGBTQ Rights",
    TagKey.ANIMAL_CRUELTY: "Against Animal Cruelty",
    TagKey.ENVIRONMENTALLY_FRIENDLY: "Environmentally Friendly",
    TagKey.ETHICAL_SOURCING: "Ethical Sourcing",
    TagKey.DATA_PRIVACY: "Data Privacy",
}


def tag_name(tag_key: str) -> str:
    """Display name for a tag key, falling back to a humanized key."""
    try:
        return TAG_NAMES[TagKey(tag_key)]
    except ValueError:
        return tag_key.replace("_", " ").title()
