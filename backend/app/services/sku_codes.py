"""
Code Deriver - Converte marca/modelo em texto livre para códigos curtos

Regras testadas em ordem de prioridade; a primeira que casar vence.
Funções puras e totais: nunca levantam erro, sempre retornam string não vazia.

Usage:
    brand_code("Louis Vuitton")   # "LV"
    model_code("Neverfull MM")    # "NVF"
    model_code("Odeon")           # "ODE"
"""
import re
from typing import Optional, Tuple

GENERIC_BRAND = "BR-GEN"
GENERIC_MODEL = "GEN"

# (palavras-chave, código) - ordem importa
BRAND_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("louis", "lv"), "LV"),
    (("chanel",), "CH"),
    (("gucci",), "GC"),
    (("prada",), "PR"),
    (("miu",), "MM"),
    (("burberry",), "BB"),
    (("coach",), "CHC"),
    (("ferragamo",), "FG"),
    (("ysl", "saint laurent"), "YSL"),
    (("celine",), "CL"),
)

# "zippy" antes de "wallet": "Zippy Wallet" é ZPY, não WLT
MODEL_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("neverfull",), "NVF"),
    (("alma",), "ALM"),
    (("speedy",), "SPD"),
    (("passy",), "PSY"),
    (("pochette",), "PCH"),
    (("zippy",), "ZPY"),
    (("wallet",), "WLT"),
)

MODEL_CODE_LENGTH = 3

_NON_ALNUM = re.compile(r"[\W_]+")


def _match_rules(text: str, rules) -> Optional[str]:
    for keywords, code in rules:
        if any(keyword in text for keyword in keywords):
            return code
    return None


def brand_code(brand: Optional[str]) -> str:
    """Código da marca ou BR-GEN quando não reconhecida/vazia"""
    if not brand:
        return GENERIC_BRAND
    return _match_rules(brand.lower(), BRAND_RULES) or GENERIC_BRAND


def model_code(model: Optional[str]) -> str:
    """
    Código de 3 letras do modelo.

    Sem regra correspondente: remove tudo que não é alfanumérico, passa para
    maiúsculas e usa os 3 primeiros caracteres, completando com X
    ("Id" -> "IDX", "A" -> "AXX"). Vazio após a limpeza -> GEN.
    """
    if not model:
        return GENERIC_MODEL

    code = _match_rules(model.lower(), MODEL_RULES)
    if code:
        return code

    cleaned = _NON_ALNUM.sub("", model).upper()
    if not cleaned:
        return GENERIC_MODEL
    return cleaned[:MODEL_CODE_LENGTH].ljust(MODEL_CODE_LENGTH, "X")


def derive_codes(brand: Optional[str], model: Optional[str]) -> Tuple[str, str]:
    return brand_code(brand), model_code(model)


def composite_prefix(brand_c: str, model_c: str) -> str:
    """Chave do contador: {brandCode}-{modelCode}"""
    return f"{brand_c}-{model_c}"
