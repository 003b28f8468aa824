import pytest

from outer_worlds_save.parser.decoders import (
    decode_chunk,
    get_decoder,
    register_decoder,
    registered_names,
    unregister_decoder,
)
from outer_worlds_save.parser.scanner import ChunkRecord


@pytest.fixture
def abcd_decoder():
    @register_decoder('ABCD')
    def decode_abcd(record, data):
        return {'offset': record.offset, 'size': len(data)}

    yield decode_abcd
    unregister_decoder('ABCD')


def test_no_decoder_returns_none():
    assert decode_chunk(ChunkRecord(0, 'QQQQ', 9), b'x' * 9) is None


def test_registered_decoder_is_called(abcd_decoder):
    assert get_decoder('ABCD') is abcd_decoder
    assert 'ABCD' in registered_names()
    assert decode_chunk(ChunkRecord(8, 'ABCD', 12), b'y' * 12) == {'offset': 8, 'size': 12}


def test_duplicate_registration_rejected(abcd_decoder):
    with pytest.raises(ValueError):
        register_decoder('ABCD')(lambda record, data: None)


def test_decoder_errors_propagate():
    @register_decoder('BOOM')
    def decode_boom(record, data):
        raise RuntimeError('bad entry')

    try:
        with pytest.raises(RuntimeError):
            decode_chunk(ChunkRecord(0, 'BOOM', 9), b'z' * 9)
    finally:
        unregister_decoder('BOOM')
