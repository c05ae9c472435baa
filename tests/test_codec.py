import pytest

from ibbchain.accrual_msgs import MsgCreateClaim, MsgDeleteApr
from ibbchain.codec import Codec, InterfaceRegistry, register_codec, register_interfaces
from ibbchain.entity_msgs import MsgCreateNft, MsgDeletePool
from ibbchain.ledger_msgs import MsgUpdateBorrow
from ibbchain.msg import Msg, MsgChooseOffer


@pytest.fixture
def cdc():
    codec = Codec()
    register_codec(codec)
    return codec


def test_names_from_source(cdc):
    assert cdc.name_of(MsgCreateNft) == "ibb/CreateNft"
    assert cdc.type_of("ibb/UpdateBorrow") is MsgUpdateBorrow
    assert cdc.type_of("ibb/DeletePool") is MsgDeletePool


@pytest.mark.parametrize("cls", [MsgChooseOffer, MsgDeleteApr, MsgCreateNft, MsgUpdateBorrow])
def test_name_round_trip(cdc, cls):
    assert cdc.type_of(cdc.name_of(cls)) is cls


def test_name_matches_message_type(cdc):
    for name in ("ibb/CreateNft", "ibb/DeleteApr", "ibb/UpdateBorrow"):
        assert "ibb/" + cdc.type_of(name).msg_type == name


def test_claim_messages_not_registered(cdc):
    with pytest.raises(KeyError):
        cdc.name_of(MsgCreateClaim)
    with pytest.raises(KeyError):
        cdc.type_of("ibb/CreateClaim")


def test_duplicate_registration_rejected(cdc):
    with pytest.raises(ValueError):
        cdc.register_concrete(MsgCreateNft, "ibb/Other")
    with pytest.raises(ValueError):
        cdc.register_concrete(MsgCreateClaim, "ibb/CreateNft")


def test_register_twice_fails():
    codec = Codec()
    register_codec(codec)
    with pytest.raises(ValueError):
        register_codec(codec)


def test_interfaces_match_codec(cdc):
    registry = InterfaceRegistry()
    register_interfaces(registry)
    impls = registry.list_implementations(Msg)
    assert impls[0] is MsgChooseOffer
    assert len(impls) == len(set(impls))
    assert all(cdc.type_of(cdc.name_of(cls)) is cls for cls in impls)
    assert MsgCreateClaim not in impls


def test_interfaces_idempotent():
    registry = InterfaceRegistry()
    register_interfaces(registry)
    first = registry.list_implementations(Msg)
    register_interfaces(registry)
    assert registry.list_implementations(Msg) == first


def test_unknown_interface_is_empty():
    assert InterfaceRegistry().list_implementations(Msg) == []


def test_non_implementation_rejected():
    registry = InterfaceRegistry()
    with pytest.raises(TypeError):
        registry.register_implementations(Msg, int)