"""Tests for transaction config encoding and the tag-less fee shapes."""

import pytest
from pydantic import ValidationError

from jupswap.codecs import Pubkey
from jupswap.contracts import (
    AutoComputeUnitPrice,
    AutoMultiplierFee,
    ComputeUnitPriceMicroLamports,
    DynamicSlippageSettings,
    PrioritizationFeeLamports,
    PriorityLevel,
    PriorityLevelFee,
    TransactionConfig,
    decode_compute_unit_price,
    decode_prioritization_fee,
    encode_compute_unit_price,
    encode_prioritization_fee,
)
from jupswap.exceptions import DeserializationError, UnrecognizedConfigShape

from constants import USDC_MINT, USER_KEY


class TestPrioritizationFeeDecoding:
    """Tests for inferring the fee shape from JSON."""

    def test_bare_number_is_fixed_lamports(self):
        assert decode_prioritization_fee(10_000) == PrioritizationFeeLamports(10_000)

    def test_auto_multiplier(self):
        fee = decode_prioritization_fee({"autoMultiplier": 3})

        assert fee == AutoMultiplierFee(multiplier=3)
        assert fee.max_lamports is None

    def test_auto_multiplier_with_cap(self):
        fee = decode_prioritization_fee({"autoMultiplier": 2, "maxLamports": 5_000_000})

        assert fee == AutoMultiplierFee(multiplier=2, max_lamports=5_000_000)

    def test_priority_level(self):
        fee = decode_prioritization_fee(
            {"priorityLevelWithMaxLamports": {"priorityLevel": "veryHigh", "maxLamports": 4_000_000}}
        )

        assert fee == PriorityLevelFee(PriorityLevel.VERY_HIGH, max_lamports=4_000_000)

    def test_priority_level_without_cap(self):
        fee = decode_prioritization_fee({"priorityLevelWithMaxLamports": {"priorityLevel": "none"}})

        assert fee == PriorityLevelFee(PriorityLevel.NONE)

    @pytest.mark.parametrize("name", ["none", "low", "medium", "high", "veryHigh", "unsafeMax"])
    def test_every_tier_accepted(self, name):
        fee = decode_prioritization_fee({"priorityLevelWithMaxLamports": {"priorityLevel": name}})

        assert fee.priority_level.value == name

    def test_auto_marker_takes_priority_over_tier(self):
        """Test shapes are tried in a fixed order."""
        fee = decode_prioritization_fee(
            {"autoMultiplier": 1, "priorityLevelWithMaxLamports": {"priorityLevel": "high"}}
        )

        assert isinstance(fee, AutoMultiplierFee)

    def test_unknown_tier_rejected(self):
        """Test an unknown tier never falls back to a default."""
        with pytest.raises(UnrecognizedConfigShape, match="Ultra"):
            decode_prioritization_fee({"priorityLevelWithMaxLamports": {"priorityLevel": "Ultra"}})

    @pytest.mark.parametrize(
        "value",
        [
            "auto",
            "10000",
            True,
            None,
            1.5,
            -1,
            [],
            {},
            {"jitoTipLamports": 1000},
            {"autoMultiplier": "2"},
            {"autoMultiplier": 2, "maxLamports": -1},
            {"priorityLevelWithMaxLamports": "high"},
            {"priorityLevelWithMaxLamports": {}},
        ],
    )
    def test_unrecognized_shapes_rejected(self, value):
        with pytest.raises(UnrecognizedConfigShape):
            decode_prioritization_fee(value)


class TestPrioritizationFeeEncoding:
    """Tests for encoding each fee shape."""

    def test_fixed_is_bare_number(self):
        assert encode_prioritization_fee(PrioritizationFeeLamports(1234)) == 1234

    def test_auto_without_cap_omits_max(self):
        assert encode_prioritization_fee(AutoMultiplierFee(2)) == {"autoMultiplier": 2}

    def test_tier_with_cap(self):
        encoded = encode_prioritization_fee(PriorityLevelFee(PriorityLevel.UNSAFE_MAX, 9_000))

        assert encoded == {
            "priorityLevelWithMaxLamports": {"priorityLevel": "unsafeMax", "maxLamports": 9_000}
        }

    @pytest.mark.parametrize(
        "fee",
        [
            PrioritizationFeeLamports(0),
            PrioritizationFeeLamports(50_000),
            AutoMultiplierFee(1),
            AutoMultiplierFee(4, max_lamports=1_000_000),
            PriorityLevelFee(PriorityLevel.MEDIUM),
            PriorityLevelFee(PriorityLevel.HIGH, max_lamports=0),
        ],
    )
    def test_shape_preserved(self, fee):
        """Test decode(encode(x)) keeps both the shape and its fields."""
        decoded = decode_prioritization_fee(encode_prioritization_fee(fee))

        assert type(decoded) is type(fee)
        assert decoded == fee

    def test_not_a_fee(self):
        with pytest.raises(TypeError):
            encode_prioritization_fee(1000)


class TestComputeUnitPrice:
    """Tests for the compute unit price shapes."""

    def test_number(self):
        assert decode_compute_unit_price(500) == ComputeUnitPriceMicroLamports(500)
        assert encode_compute_unit_price(ComputeUnitPriceMicroLamports(500)) == 500

    def test_auto(self):
        assert decode_compute_unit_price("auto") == AutoComputeUnitPrice()
        assert encode_compute_unit_price(AutoComputeUnitPrice()) == "auto"

    @pytest.mark.parametrize("value", ["AUTO", "500", False, None, {"auto": True}])
    def test_unrecognized(self, value):
        with pytest.raises(UnrecognizedConfigShape):
            decode_compute_unit_price(value)


class TestTransactionConfig:
    """Tests for TransactionConfig bodies."""

    def test_empty_config_encodes_to_empty_body(self):
        """Test unset options are omitted rather than sent as null."""
        assert TransactionConfig().to_wire() == {}

    def test_explicit_false_and_zero_are_sent(self):
        """Test set-to-falsy is distinguished from unset."""
        body = TransactionConfig(
            wrap_and_unwrap_sol=False,
            prioritization_fee_lamports=PrioritizationFeeLamports(0),
            blockhash_slots_to_expiry=0,
        ).to_wire()

        assert body == {
            "wrapAndUnwrapSol": False,
            "prioritizationFeeLamports": 0,
            "blockhashSlotsToExpiry": 0,
        }

    def test_full_config(self):
        """Test every option uses its wire name and form."""
        body = TransactionConfig(
            wrap_and_unwrap_sol=True,
            allow_optimized_wrapped_sol_token_account=True,
            fee_account=USDC_MINT,
            destination_token_account=Pubkey.from_string(USER_KEY),
            compute_unit_price_micro_lamports=AutoComputeUnitPrice(),
            prioritization_fee_lamports=PriorityLevelFee(PriorityLevel.HIGH, 1_000_000),
            dynamic_compute_unit_limit=True,
            dynamic_slippage=DynamicSlippageSettings(max_bps=300),
            as_legacy_transaction=False,
            use_shared_accounts=True,
            skip_user_accounts_rpc_calls=False,
        ).to_wire()

        assert body == {
            "wrapAndUnwrapSol": True,
            "allowOptimizedWrappedSolTokenAccount": True,
            "feeAccount": USDC_MINT,
            "destinationTokenAccount": USER_KEY,
            "computeUnitPriceMicroLamports": "auto",
            "prioritizationFeeLamports": {
                "priorityLevelWithMaxLamports": {"priorityLevel": "high", "maxLamports": 1_000_000}
            },
            "dynamicComputeUnitLimit": True,
            "dynamicSlippage": {"maxBps": 300},
            "asLegacyTransaction": False,
            "useSharedAccounts": True,
            "skipUserAccountsRpcCalls": False,
        }

    def test_decode_from_wire(self):
        """Test a body decodes with the fee shape inferred."""
        config = TransactionConfig.from_wire(
            {
                "prioritizationFeeLamports": {"autoMultiplier": 2},
                "computeUnitPriceMicroLamports": 1000,
                "dynamicComputeUnitLimit": True,
            }
        )

        assert config.prioritization_fee_lamports == AutoMultiplierFee(2)
        assert config.compute_unit_price_micro_lamports == ComputeUnitPriceMicroLamports(1000)
        assert config.dynamic_compute_unit_limit is True
        assert config.wrap_and_unwrap_sol is None

    @pytest.mark.parametrize(
        "fee",
        [
            10_000,
            {"autoMultiplier": 3},
            {"autoMultiplier": 3, "maxLamports": 7},
            {"priorityLevelWithMaxLamports": {"priorityLevel": "low"}},
            {"priorityLevelWithMaxLamports": {"priorityLevel": "medium", "maxLamports": 10}},
        ],
    )
    def test_wire_round_trip(self, fee):
        """Test decode -> encode reproduces the same JSON."""
        body = {"prioritizationFeeLamports": fee}

        assert TransactionConfig.from_wire(body).to_wire() == body

    def test_unknown_tier_is_deserialization_error(self):
        """Test an unknown tier fails the whole decode."""
        with pytest.raises(DeserializationError, match="Ultra"):
            TransactionConfig.from_wire(
                {"prioritizationFeeLamports": {"priorityLevelWithMaxLamports": {"priorityLevel": "Ultra"}}}
            )

    def test_invalid_fee_on_construction(self):
        with pytest.raises(ValidationError):
            TransactionConfig(prioritization_fee_lamports="fast")
