"""
SKU Service - Formata e atribui o identificador dos itens

Formato: {brandCode}-{modelCode}-EMZ-{sequência com 3 dígitos}
Ex: LV-SPD-EMZ-007, BR-GEN-GEN-EMZ-1250

Trava (lock): depois do primeiro save o item_number nunca muda, mesmo que
marca/modelo sejam editados. Só um reset explícito gera outro número.
"""
import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Optional

from app.config import settings
from app.models.inventory_item import InventoryItem
from app.services.sequence_store import SequenceStore
from app.services.sku_codes import derive_codes, composite_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedSku:
    item_number: str
    brand_code: str
    model_code: str
    sequence: int
    slug: str

    def as_response(self) -> dict:
        return {
            "ok": True,
            "itemNumber": self.item_number,
            "brandCode": self.brand_code,
            "modelCode": self.model_code,
            "sequence": self.sequence,
            "slug": self.slug,
            "fullSlug": self.slug,
        }


def format_item_number(brand_c: str, model_c: str, sequence: int) -> str:
    """Número nunca é truncado: 1250 continua 1250 com largura mínima 3"""
    digits = settings.SKU_SEQUENCE_DIGITS
    return f"{brand_c}-{model_c}-{settings.SKU_SEPARATOR_TOKEN}-{sequence:0{digits}d}"


def _slugify(value: str) -> str:
    value = unicodedata.normalize("NFKD", value)
    value = value.encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value).strip()
    return re.sub(r"\s+", "-", value)


def build_inventory_slug(
    item_number: Optional[str],
    brand: Optional[str] = None,
    model: Optional[str] = None
) -> str:
    """
    Slug público: {item_number}-{marca}-{modelo} em minúsculas

    Usage:
        build_inventory_slug("LV-SPD-EMZ-007", "Louis Vuitton", "Speedy 30")
        # "lv-spd-emz-007-louis-vuitton-speedy-30"
    """
    base = " ".join(part for part in (brand, model) if part).lower()
    simple_slug = _slugify(base)

    if not item_number and not simple_slug:
        return ""
    if not simple_slug:
        return item_number.lower()
    if not item_number:
        return simple_slug
    return f"{item_number.lower()}-{simple_slug}"


def generate_sku(store: SequenceStore, brand: Optional[str], model: Optional[str]) -> GeneratedSku:
    """
    Deriva os códigos, aloca a sequência e formata o identificador.

    Falhas do SequenceStore (StorageUnavailable, InvariantViolation) sobem
    sem tratamento: nunca devolver um identificador parcial.
    """
    brand_c, model_c = derive_codes(brand, model)
    sequence = store.allocate(composite_prefix(brand_c, model_c))
    item_number = format_item_number(brand_c, model_c, sequence)

    return GeneratedSku(
        item_number=item_number,
        brand_code=brand_c,
        model_code=model_c,
        sequence=sequence,
        slug=build_inventory_slug(item_number, brand, model),
    )


def assign_item_number(store: SequenceStore, item: InventoryItem, reset: bool = False) -> InventoryItem:
    """
    Atribui item_number ao item e trava.

    Args:
        store: SequenceStore usado na alocação
        item: Item (novo ou existente)
        reset: Se True, gera novo número mesmo com o item travado

    Returns:
        O próprio item (alterado apenas se estava destravado ou reset=True)
    """
    if item.item_number_locked and not reset:
        return item

    previous = item.item_number
    generated = generate_sku(store, item.brand, item.model)

    item.item_number = generated.item_number
    item.brand_code = generated.brand_code
    item.model_code = generated.model_code
    item.sequence = generated.sequence
    item.item_number_locked = True

    # Slug acompanha o número quando foi gerado a partir dele
    if reset or not item.slug:
        item.slug = generated.slug
    if reset or not item.full_slug:
        item.full_slug = generated.slug

    if previous and previous != generated.item_number:
        logger.info("[SKU] Item %s: %s substituído por %s", item.id, previous, generated.item_number)
    return item


def parse_item_number(item_number: str) -> Optional[tuple]:
    """
    Decompõe um item_number em (brand_code, model_code, sequence).
    Retorna None se o texto não estiver no formato gerado pelo backend.

    Usage:
        parse_item_number("BR-GEN-GEN-EMZ-012")  # ("BR-GEN", "GEN", 12)
    """
    parts = (item_number or "").rsplit("-", 2)
    if len(parts) != 3:
        return None
    prefix, token, digits = parts
    if token != settings.SKU_SEPARATOR_TOKEN or not digits.isdigit():
        return None
    if len(digits) < settings.SKU_SEQUENCE_DIGITS or "-" not in prefix:
        return None

    # model code nunca tem hífen; o brand code pode ter (BR-GEN)
    brand_c, model_c = prefix.rsplit("-", 1)
    if not brand_c or not model_c:
        return None
    sequence = int(digits)
    if sequence < 1 or format_item_number(brand_c, model_c, sequence) != item_number:
        return None
    return brand_c, model_c, sequence


def claim_item_number(store: SequenceStore, item: InventoryItem, item_number: str) -> bool:
    """
    Atribui ao item um número já emitido pelo generate-sku (sem alocar outro).

    Só aceita o número se o contador do prefixo já passou dessa sequência.
    Verificar antes que nenhum outro item usa o número.

    Returns:
        False se o número não foi emitido por este backend

    Raises:
        StorageUnavailable: banco inacessível ao consultar o contador
    """
    parsed = parse_item_number(item_number)
    if parsed is None:
        return False

    brand_c, model_c, sequence = parsed
    last_value = store.current(composite_prefix(brand_c, model_c))
    if last_value is None or last_value < sequence:
        return False

    item.item_number = item_number
    item.brand_code = brand_c
    item.model_code = model_c
    item.sequence = sequence
    item.item_number_locked = True

    generated_slug = build_inventory_slug(item_number, item.brand, item.model)
    if not item.slug:
        item.slug = generated_slug
    if not item.full_slug:
        item.full_slug = generated_slug

    logger.info("[SKU] Item %s assumiu %s emitido pelo generate-sku", item.id, item_number)
    return True
