import pytest

from multirole import i18n
from multirole.core import (
    CoreError,
    DataSupplier,
    DuelOptions,
    DuelStatus,
    Logger,
    LogType,
    ScriptSupplier,
    Wrapper,
    script_data,
    script_size,
)


class _Data(DataSupplier):
    def __init__(self):
        self.released = []

    def data_from_code(self, code):
        return {"code": code}

    def data_usage_done(self, data):
        self.released.append(data)


class _Scripts(ScriptSupplier):
    def __init__(self, scripts):
        self.scripts = scripts

    def script_from_path(self, path):
        return self.scripts.get(path)


class _Log(Logger):
    def __init__(self):
        self.entries = []

    def log(self, log_type, text):
        self.entries.append((log_type, text))


def _options(seed=(1, 2, 3, 4), flags=0):
    return DuelOptions(_Data(), _Scripts({}), None, seed, flags, None, None)


def test_script_data_none_for_missing():
    assert script_data(None) is None


def test_script_data_none_for_empty():
    assert script_data("") is None
    assert script_data(b"") is None


def test_script_data_returns_contents():
    assert script_data("print(1)") == "print(1)"


def test_script_size_missing_is_zero():
    assert script_size(None) == 0


def test_script_size_matches_length():
    text = "local x = 1"
    assert script_size(text) == len(text)
    assert script_size("") == 0


def test_script_supplier_lookup():
    supplier = _Scripts({"utility.lua": "return 1"})
    found = supplier.script_from_path("utility.lua")
    missing = supplier.script_from_path("constant.lua")
    assert script_data(found) == "return 1"
    assert script_data(missing) is None
    assert script_size(missing) == 0


def test_duel_status_from_core_value():
    assert DuelStatus(2) is DuelStatus.CONTINUE
    assert DuelStatus(0) is DuelStatus.END


def test_log_type_from_core_value():
    assert LogType(1) is LogType.FROM_SCRIPT
    with pytest.raises(ValueError):
        LogType(7)


def test_logger_receives_entries():
    logger = _Log()
    logger.log(LogType(0), "oops")
    assert logger.entries == [(LogType.ERROR, "oops")]


def test_core_error_carries_message():
    err = CoreError(i18n.DLWRAPPER_EXCEPT_CREATE_DUEL)
    assert str(err) == "OCG_CreateDuel failed!"
    assert isinstance(err, RuntimeError)


def test_duel_options_seed_is_tuple():
    opts = _options(seed=[5, 6, 7, 8])
    assert opts.seed == (5, 6, 7, 8)


@pytest.mark.parametrize("seed", [(1, 2, 3), (1, 2, 3, 4, 5), (-1, 0, 0, 0), (1 << 64, 0, 0, 0)])
def test_duel_options_rejects_bad_seed(seed):
    with pytest.raises(ValueError):
        _options(seed=seed)


def test_duel_options_rejects_bad_flags():
    with pytest.raises(ValueError):
        _options(flags=-1)


def test_abstract_classes_cannot_be_instantiated():
    for cls in (Logger, ScriptSupplier, DataSupplier, Wrapper):
        with pytest.raises(TypeError):
            cls()


def test_hwrapper_create_duel_message_matches_dlwrapper():
    assert i18n.HWRAPPER_EXCEPT_CREATE_DUEL == i18n.DLWRAPPER_EXCEPT_CREATE_DUEL
    assert i18n.DATA_PROVIDER_LOADING_ONE.format("cards.cdb") == "Loading up cards.cdb..."