"""Query-string parameter resolution for the action endpoints.

Everything here is a pure function of the query mapping and the configured
defaults. Amounts are parsed as ``Decimal`` and turned into integer base units
before they leave this module.
"""

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, InvalidOperation, Overflow
from typing import Mapping, Optional

from solders.pubkey import Pubkey

from limitblink.errors import InvalidParameterError
from limitblink.routing.jupiter_limit import TOKEN_DECIMALS

TO_PARAM = "to"
AMOUNT_PARAM = "amount"
AMOUNT_SOL_PARAM = "amountInSOL"
AMOUNT_USDC_PARAM = "amountInUSDC"

# Token amounts are u64 on chain
MAX_BASE_UNITS = 2**64 - 1


@dataclass(frozen=True)
class ActionDefaults:
    """Fallback values for absent query parameters."""

    to_address: Pubkey
    sol_amount: Decimal
    usdc_amount: Decimal


@dataclass(frozen=True)
class TransferParams:
    """Resolved parameters of the fixed-amount limit action."""

    to: Pubkey
    amount: Decimal
    lamports: int


@dataclass(frozen=True)
class LimitOrderParams:
    """Resolved parameters of the sized limit-order action."""

    to: Pubkey
    sol_amount: Decimal
    usdc_amount: Decimal
    sol_base_units: int
    usdc_base_units: int


def _get(query: Mapping[str, str], name: str) -> Optional[str]:
    # Empty values count as absent
    value = query.get(name)
    return value or None


def parse_address(value: str, field: str) -> Pubkey:
    """Parse a base58 address, naming ``field`` on failure."""
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidParameterError(field) from e


def parse_amount(value: str, field: str) -> Decimal:
    """Parse a positive decimal amount, naming ``field`` on failure.

    Only plain decimal literals are accepted; underscore digit grouping is
    rejected.
    """
    if "_" in value:
        raise InvalidParameterError(field)
    try:
        amount = Decimal(value.strip())
    except InvalidOperation as e:
        raise InvalidParameterError(field) from e

    if not amount.is_finite() or amount <= 0:
        raise InvalidParameterError(field)
    return amount


def to_base_units(amount: Decimal, decimals: int, field: str) -> int:
    """Scale a human-readable amount to integer base units.

    Fractions of a base unit are truncated. Amounts that truncate to zero or
    do not fit in a u64 are rejected.
    """
    try:
        scaled = amount.scaleb(decimals)
    except (Overflow, InvalidOperation) as e:
        raise InvalidParameterError(field) from e

    # 2**64 has 20 digits
    if scaled.adjusted() >= 20:
        raise InvalidParameterError(field)

    units = int(scaled.to_integral_value(rounding=ROUND_DOWN))

    if units <= 0 or units > MAX_BASE_UNITS:
        raise InvalidParameterError(field)
    return units


def resolve_address(query: Mapping[str, str], defaults: ActionDefaults) -> Pubkey:
    """Resolve the ``to`` parameter, falling back to the default address."""
    raw = _get(query, TO_PARAM)
    if raw is None:
        return defaults.to_address
    return parse_address(raw, TO_PARAM)


def resolve_amount(query: Mapping[str, str], name: str, default: Decimal) -> Decimal:
    raw = _get(query, name)
    if raw is None:
        return default
    return parse_amount(raw, name)


def resolve_transfer_params(
    query: Mapping[str, str],
    defaults: ActionDefaults,
) -> TransferParams:
    """Resolve ``to`` and ``amount`` for the fixed-amount limit action.

    ``amount`` is in SOL and is also carried as lamports.
    """
    to = resolve_address(query, defaults)
    amount = resolve_amount(query, AMOUNT_PARAM, defaults.sol_amount)
    lamports = to_base_units(amount, TOKEN_DECIMALS["SOL"], AMOUNT_PARAM)
    return TransferParams(to=to, amount=amount, lamports=lamports)


def resolve_limit_order_params(
    query: Mapping[str, str],
    defaults: ActionDefaults,
) -> LimitOrderParams:
    """Resolve ``to``, ``amountInSOL`` and ``amountInUSDC`` and scale the amounts.

    Args:
        query: Query-string mapping
        defaults: Configured fallbacks

    Returns:
        LimitOrderParams with both human amounts and base units

    Raises:
        InvalidParameterError: naming the first offending parameter
    """
    to = resolve_address(query, defaults)
    sol_amount = resolve_amount(query, AMOUNT_SOL_PARAM, defaults.sol_amount)
    usdc_amount = resolve_amount(query, AMOUNT_USDC_PARAM, defaults.usdc_amount)

    return LimitOrderParams(
        to=to,
        sol_amount=sol_amount,
        usdc_amount=usdc_amount,
        sol_base_units=to_base_units(sol_amount, TOKEN_DECIMALS["SOL"], AMOUNT_SOL_PARAM),
        usdc_base_units=to_base_units(usdc_amount, TOKEN_DECIMALS["USDC"], AMOUNT_USDC_PARAM),
    )
