# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Unit tests for the dicomtree.filereader module."""

import logging
from struct import pack
import zlib

import pytest

from dicomtree.dataelem import UNDEFINED_LENGTH
from dicomtree.dataset import Dataset
from dicomtree.errors import (
    PreconditionError, DecodeFailure, LengthMismatchError,
    ChildParseFailure, HeaderWarning, StandardViolationWarning,
    UnknownTransferSyntaxWarning
)
from dicomtree.filereader import (
    dcmread, read_bytes, DatasetReader, Diagnostic, ParseResult
)
from dicomtree.sequence import Sequence, Item
from dicomtree.uid import (
    ImplicitVRLittleEndian, ExplicitVRLittleEndian, ExplicitVRBigEndian,
    DeflatedExplicitVRLittleEndian, JPEGBaseline8Bit
)
from dicomtree.util.hexutil import hex2bytes
from dicomtree.values import extra_length_VRs


HEADER = b'\x00' * 128 + b'DICM'

# (0010,0010) PN implicit VR little endian, value 'Doe^John'
IMPL_PATIENT_NAME = hex2bytes(
    "10 00 10 00 08 00 00 00"
    " 44 6f 65 5e 4a 6f 68 6e"
)

# (0010,0010) PN explicit VR little endian, value 'Doe^John'
EXPL_PATIENT_NAME = hex2bytes(
    "10 00 10 00 50 4e 08 00"
    " 44 6f 65 5e 4a 6f 68 6e"
)


def implicit(tag, value, length=None):
    """Return an implicit VR little endian encoded element."""
    length = len(value) if length is None else length
    return pack('<HHL', tag >> 16, tag & 0xFFFF, length) + value


def explicit(tag, VR, value, little_endian=True, length=None):
    """Return an explicit VR encoded element."""
    order = '<' if little_endian else '>'
    length = len(value) if length is None else length
    encoded = pack(f'{order}HH', tag >> 16, tag & 0xFFFF) + VR.encode()
    if VR in extra_length_VRs:
        return encoded + b'\x00\x00' + pack(f'{order}L', length) + value

    return encoded + pack(f'{order}H', length) + value


def item(value=b'', length=None):
    """Return a little endian item, item delimiter or sequence delimiter."""
    return implicit(0xFFFEE000, value, length)


ITEM_DELIMITER = implicit(0xFFFEE00D, b'')
SEQUENCE_DELIMITER = implicit(0xFFFEE0DD, b'')


def meta(syntax):
    """Return a File Meta Information group with the transfer syntax."""
    uid = syntax.encode()
    if len(uid) % 2:
        uid += b'\x00'
    return explicit(0x00020010, 'UI', uid)


def categories(result):
    return [msg.category for msg in result.messages]


class TestHeader:
    def test_preamble_and_prefix(self):
        """Test a file with a header and one implicit VR element."""
        result = read_bytes(HEADER + IMPL_PATIENT_NAME, raw=False)
        assert result.success
        assert result.signature
        assert [] == result.messages
        assert 1 == len(result.dataset)
        elem = result.dataset['0010,0010']
        assert 'Doe^John' == elem.value
        assert 'PN' == elem.VR
        assert "Patient's Name" == elem.name
        assert not result.explicit
        assert result.is_little_endian
        assert ImplicitVRLittleEndian == result.transfer_syntax

    def test_missing_prefix(self):
        """Test data without the header is read in best effort mode."""
        # a long enough value so the data is at least 132 bytes
        description = b'A' * 140
        data = implicit(0x00081030, description) + IMPL_PATIENT_NAME
        result = read_bytes(data, raw=False)
        assert result.success
        assert not result.signature
        assert [HeaderWarning] == categories(result)
        assert "'DICM' prefix is missing" in str(result.messages[0])
        assert 2 == len(result.dataset)
        assert 'A' * 140 == result.dataset['0008,1030'].value
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_missing_prefix_forces_implicit(self):
        """Test the meta group is read as implicit VR without a header."""
        uid = b'1.2.840.10008.1.2.1\x00'
        data = implicit(0x00020010, uid) + b'\x00' * 120
        result = read_bytes(data, raw=False)
        elem = result.dataset['0002,0010']
        assert '1.2.840.10008.1.2.1' == elem.value
        assert 'UI' == elem.VR

    def test_too_small(self):
        """Test a file buffer too small for the header fails."""
        result = read_bytes(b'\x00' * 131, raw=False)
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 0 == len(result.dataset)

    def test_raw_skips_header_check(self):
        """Test raw buffers aren't checked for a header."""
        result = read_bytes(IMPL_PATIENT_NAME)
        assert result.success
        assert [] == result.messages
        assert not result.signature
        assert 'Doe^John' == result.dataset['0010,0010'].value


class TestTransferSyntax:
    def test_explicit_little_endian(self):
        """Test the meta group transfer syntax is used for the data set."""
        data = HEADER + meta(ExplicitVRLittleEndian) + EXPL_PATIENT_NAME
        result = read_bytes(data, raw=False)
        assert result.success
        assert result.explicit
        assert result.is_little_endian
        assert ExplicitVRLittleEndian == result.transfer_syntax
        assert [] == result.messages
        assert ['0002,0010', '0010,0010'] == [
            elem.tag for elem in result.dataset
        ]
        assert 'Doe^John' == result.dataset['0010,0010'].value
        assert ExplicitVRLittleEndian == result.dataset['0002,0010'].value

    def test_explicit_big_endian(self):
        """Test the first tag after the meta group is re-read."""
        body = (
            explicit(0x00100010, 'PN', b'Doe^John', little_endian=False)
            + explicit(0x00280010, 'US', pack('>H', 512), little_endian=False)
            + explicit(0x00280030, 'DS', b'0.5\\0.25', little_endian=False)
        )
        result = read_bytes(HEADER + meta(ExplicitVRBigEndian) + body,
                            raw=False)
        assert result.success
        assert [] == result.messages
        assert not result.is_little_endian
        ds = result.dataset
        assert ['0002,0010', '0010,0010', '0028,0010', '0028,0030'] == [
            elem.tag for elem in ds
        ]
        assert 'Doe^John' == ds['0010,0010'].value
        assert 512 == ds['0028,0010'].value
        assert '0.5\\0.25' == ds['0028,0030'].value

    def test_syntax_override(self):
        """Test a given transfer syntax overrides the meta group."""
        data = HEADER + meta(ExplicitVRLittleEndian) + IMPL_PATIENT_NAME
        result = read_bytes(data, syntax=ImplicitVRLittleEndian, raw=False)
        assert result.success
        assert not result.explicit
        assert ImplicitVRLittleEndian == result.transfer_syntax
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_raw_default_implicit(self):
        """Test a raw buffer without a transfer syntax is implicit VR."""
        result = read_bytes(IMPL_PATIENT_NAME + implicit(0x00280010, b'\x00\x02'))
        assert result.success
        assert ImplicitVRLittleEndian == result.transfer_syntax
        assert 512 == result.dataset['0028,0010'].value

    def test_raw_with_syntax(self):
        """Test a raw buffer with a negotiated transfer syntax."""
        result = read_bytes(EXPL_PATIENT_NAME, syntax=ExplicitVRLittleEndian)
        assert result.success
        assert result.explicit
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_unknown_syntax(self):
        """Test an unknown transfer syntax falls back to explicit VR LE."""
        result = read_bytes(EXPL_PATIENT_NAME, syntax='1.2.3.4')
        assert result.success
        assert [UnknownTransferSyntaxWarning] == categories(result)
        assert "'1.2.3.4'" in str(result.messages[0])
        assert result.explicit
        assert result.is_little_endian
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_deflated(self):
        """Test reading a deflated data set."""
        compressor = zlib.compressobj(9, zlib.DEFLATED, -zlib.MAX_WBITS)
        body = EXPL_PATIENT_NAME + explicit(0x00280010, 'US', b'\x00\x02')
        deflated = compressor.compress(body) + compressor.flush()
        data = HEADER + meta(DeflatedExplicitVRLittleEndian) + deflated
        result = read_bytes(data, raw=False)
        assert result.success
        assert [] == result.messages
        assert 'Doe^John' == result.dataset['0010,0010'].value
        assert 512 == result.dataset['0028,0010'].value

    def test_switch_once(self):
        """Test meta group tags after the data set aren't switched back."""
        body = EXPL_PATIENT_NAME + explicit(0x00020013, 'SH', b'DICOMTREE')
        result = read_bytes(
            HEADER + meta(ExplicitVRLittleEndian) + body, raw=False
        )
        assert result.success
        assert 'DICOMTREE' == result.dataset['0002,0013'].value


class TestLengths:
    def test_explicit_length_fields(self):
        """Test the three explicit VR length field layouts."""
        data = (
            explicit(0x00020001, 'OB', b'\x00\x01')
            + explicit(0x00080008, 'CS', b'ORIGINAL\\PRIMARY')
            + explicit(0x00081030, 'UT', b'Long text ')
        )
        result = read_bytes(data, syntax=ExplicitVRLittleEndian)
        assert result.success
        ds = result.dataset
        assert b'\x00\x01' == ds['0002,0001'].bin
        assert ds['0002,0001'].value is None
        assert 'ORIGINAL\\PRIMARY' == ds['0008,0008'].value
        assert 'UT' == ds['0008,1030'].VR
        assert 'Long text' == ds['0008,1030'].value

    def test_explicit_VR_replaces_dictionary_VR(self):
        """Test the VR in the data is used rather than the dictionary's."""
        data = explicit(0x00280010, 'UN', b'\x00\x02')
        result = read_bytes(data, syntax=ExplicitVRLittleEndian)
        elem = result.dataset['0028,0010']
        assert 'UN' == elem.VR
        assert elem.value is None
        assert b'\x00\x02' == elem.bin

    def test_odd_length(self):
        """Test an odd length is a warning only."""
        result = read_bytes(implicit(0x00100020, b'ABC') + IMPL_PATIENT_NAME)
        assert result.success
        assert [StandardViolationWarning] == categories(result)
        assert 'is odd' in str(result.messages[0])
        assert 'ABC' == result.dataset['0010,0020'].value
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_zero_length(self):
        """Test an element with no value."""
        result = read_bytes(implicit(0x00100020, b'') + IMPL_PATIENT_NAME)
        assert result.success
        elem = result.dataset['0010,0020']
        assert elem.value is None
        assert 0 == elem.length

    def test_length_past_end(self):
        """Test a length larger than the remaining data fails."""
        data = IMPL_PATIENT_NAME + implicit(0x00100020, b'ABC', length=100)
        result = read_bytes(data)
        assert not result.success
        assert [LengthMismatchError] == categories(result)
        assert 'declared length is 100 bytes' in str(result.messages[0])
        # elements read so far are kept
        assert 'Doe^John' == result.dataset['0010,0010'].value
        elem = result.dataset['0010,0020']
        assert b'ABC' == elem.bin
        assert elem.value is None

    def test_elements_after_failure_not_read(self):
        data = (
            implicit(0x00100020, b'ABCD', length=UNDEFINED_LENGTH)
            + IMPL_PATIENT_NAME
        )
        result = read_bytes(data)
        assert not result.success
        assert [LengthMismatchError] == categories(result)
        assert 'declared length is undefined' in str(result.messages[0])
        assert '0010,0010' not in result.dataset

    def test_truncated_header(self):
        """Test running out of data inside an element header."""
        result = read_bytes(b'\x10\x00\x10\x00PN\x08',
                            syntax=ExplicitVRLittleEndian)
        assert not result.success
        assert [DecodeFailure] == categories(result)
        assert '0010,0010' in str(result.messages[0])
        assert 0 == len(result.dataset)

    def test_value_decode_failure(self, monkeypatch):
        """Test a value that can't be decoded stops reading."""
        def bad_convert(VR, byte_string, is_little_endian):
            return byte_string.decode('ascii')

        monkeypatch.setattr('dicomtree.filebase.convert_value', bad_convert)
        data = implicit(0x00100010, b'Doe\xff') + IMPL_PATIENT_NAME
        result = read_bytes(data)
        assert not result.success
        assert [DecodeFailure] == categories(result)
        msg = str(result.messages[0])
        assert msg.startswith("With tag 0010,0010 got exception: 'ascii'")
        assert "\n" not in msg
        # the element is kept undecoded
        assert 1 == len(result.dataset)
        assert b'Doe\xff' == result.dataset['0010,0010'].bin
        assert result.dataset['0010,0010'].value is None

    def test_trailing_bytes(self):
        """Test fewer than 4 trailing bytes end reading cleanly."""
        result = read_bytes(IMPL_PATIENT_NAME + b'\x00\x00')
        assert result.success
        assert 1 == len(result.dataset)

    def test_empty(self):
        result = read_bytes(b'')
        assert result.success
        assert [] == result.messages
        assert 0 == len(result.dataset)
        assert result.transfer_syntax is None


class TestSequences:
    def test_defined_length(self):
        """Test a defined length sequence and item are read recursively."""
        elem = implicit(0x00081150, b'1.2.3\x00')
        seq = implicit(0x00081140, item(elem))
        result = read_bytes(seq + IMPL_PATIENT_NAME)
        assert result.success
        assert [] == result.messages
        ds = result.dataset
        assert ['0008,1140', '0010,0010'] == [e.tag for e in ds]

        seq = ds['0008,1140']
        assert isinstance(seq, Sequence)
        assert 'SQ' == seq.VR
        assert 22 == seq.length
        assert item(elem) == seq.bin
        assert 1 == len(seq)
        seq_item = seq.children[0]
        assert isinstance(seq_item, Item)
        assert 'Item' == seq_item.name
        assert 14 == seq_item.length
        assert '1.2.3' == seq_item['0008,1150'].value
        assert seq_item.parent is seq
        assert seq.parent is ds
        # reading resumes after the sequence
        assert 'Doe^John' == ds['0010,0010'].value

    def test_undefined_length(self):
        """Test undefined length sequences and items with delimiters."""
        elem = implicit(0x00081150, b'1.2.3\x00')
        seq = (
            implicit(0x00081140, b'', length=UNDEFINED_LENGTH)
            + item(length=UNDEFINED_LENGTH) + elem + ITEM_DELIMITER
            + item(length=UNDEFINED_LENGTH) + elem + ITEM_DELIMITER
            + SEQUENCE_DELIMITER
        )
        result = read_bytes(seq + IMPL_PATIENT_NAME)
        assert result.success
        assert [] == result.messages
        ds = result.dataset
        assert ['0008,1140', '0010,0010'] == [e.tag for e in ds]
        seq = ds['0008,1140']
        assert seq.is_undefined_length
        assert 2 == len(seq)
        for seq_item in seq:
            assert seq_item.is_undefined_length
            assert ['0008,1150'] == [e.tag for e in seq_item]
        # no elements for the delimiters
        assert 'FFFE,E00D' not in [e.tag for e in ds.iterall()]

    def test_defined_item_in_undefined_sequence(self):
        elem = implicit(0x00081150, b'1.2.3\x00')
        seq = (
            implicit(0x00081140, b'', length=UNDEFINED_LENGTH)
            + item(elem) + SEQUENCE_DELIMITER
        )
        result = read_bytes(seq + IMPL_PATIENT_NAME)
        assert result.success
        seq = result.dataset['0008,1140']
        assert '1.2.3' == seq.children[0]['0008,1150'].value
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_nested_sequences(self):
        """Test a sequence inside an item of another sequence."""
        inner = implicit(0x00081140, item(implicit(0x00081150, b'1.2\x00\x00')))
        outer = implicit(0x00081110, item(inner))
        result = read_bytes(outer)
        assert result.success
        names = [e.name for e in result.dataset.iterall()]
        assert [
            'Referenced Study Sequence', 'Item', 'Referenced Image Sequence',
            'Item', 'Referenced SOP Class UID'
        ] == names

    def test_explicit_sequence(self):
        """Test a sequence in explicit VR uses a 4 byte length."""
        elem = explicit(0x00081150, 'UI', b'1.2.3\x00')
        seq = explicit(0x00081140, 'SQ', item(elem))
        result = read_bytes(seq + EXPL_PATIENT_NAME,
                            syntax=ExplicitVRLittleEndian)
        assert result.success
        seq = result.dataset['0008,1140']
        assert '1.2.3' == seq.children[0]['0008,1150'].value
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_explicit_big_endian_sequence(self):
        """Test nested readers keep the big endian byte order."""
        elem = explicit(0x00081150, 'UI', b'1.2.3\x00', little_endian=False)
        be_item = pack('>HHL', 0xFFFE, 0xE000, len(elem)) + elem
        seq = explicit(0x00081140, 'SQ', be_item, little_endian=False)
        name = explicit(0x00100010, 'PN', b'Doe^John', little_endian=False)
        result = read_bytes(seq + name, syntax=ExplicitVRBigEndian)
        assert result.success
        assert [] == result.messages
        assert not result.is_little_endian
        seq = result.dataset['0008,1140']
        assert 22 == seq.length
        seq_item = seq.children[0]
        assert 14 == seq_item.length
        assert 'UI' == seq_item['0008,1150'].VR
        assert '1.2.3' == seq_item['0008,1150'].value
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_zero_length_sequence(self):
        """Test an empty defined length sequence opens no scope."""
        result = read_bytes(implicit(0x00081140, b'') + IMPL_PATIENT_NAME)
        assert result.success
        assert 0 == len(result.dataset['0008,1140'])
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_unexpected_delimiter(self):
        """Test a delimiter with no open sequence is ignored."""
        result = read_bytes(SEQUENCE_DELIMITER + IMPL_PATIENT_NAME)
        assert result.success
        assert [StandardViolationWarning] == categories(result)
        assert 'no open sequence or item' in str(result.messages[0])
        assert ['0010,0010'] == [e.tag for e in result.dataset]

    def test_unclosed_sequence(self):
        """Test data ending inside an undefined length sequence."""
        seq = (
            implicit(0x00081140, b'', length=UNDEFINED_LENGTH)
            + item(implicit(0x00081150, b'1.2.3\x00'))
        )
        result = read_bytes(seq)
        assert result.success
        assert [StandardViolationWarning] == categories(result)
        assert '1 undefined length' in str(result.messages[0])

    def test_child_failure(self):
        """Test a failure inside an item fails the whole read."""
        bad = implicit(0x00081150, b'1.2.3\x00', length=100)
        seq = implicit(0x00081140, item(bad))
        result = read_bytes(seq + IMPL_PATIENT_NAME)
        assert not result.success
        assert [
            LengthMismatchError, ChildParseFailure, ChildParseFailure
        ] == categories(result)
        # the elements read are kept, those after the failure aren't read
        seq = result.dataset['0008,1140']
        assert b'1.2.3\x00' == seq.children[0]['0008,1150'].bin
        assert '0010,0010' not in result.dataset

    def test_sequence_past_end(self):
        """Test a sequence longer than the remaining data."""
        seq = implicit(0x00081140, item(), length=100)
        result = read_bytes(IMPL_PATIENT_NAME + seq)
        assert not result.success
        assert [LengthMismatchError] == categories(result)
        assert 0 == len(result.dataset['0008,1140'])

    def test_max_depth_undefined(self, shallow_nesting):
        """Test nesting deeper than the maximum fails."""
        data = (
            implicit(0x00081140, b'', length=UNDEFINED_LENGTH)
            + item(length=UNDEFINED_LENGTH)
            + IMPL_PATIENT_NAME
        )
        result = read_bytes(data)
        assert not result.success
        assert [DecodeFailure] == categories(result)
        assert 'maximum of 1' in str(result.messages[0])
        assert '0010,0010' not in [e.tag for e in result.dataset.iterall()]

    def test_max_depth_defined(self, shallow_nesting):
        data = implicit(0x00081140, item(IMPL_PATIENT_NAME))
        result = read_bytes(data)
        assert not result.success
        assert DecodeFailure in categories(result)
        assert ChildParseFailure in categories(result)


class TestEncapsulatedPixelData:
    def test_fragments(self):
        """Test the pixel data items of encapsulated pixel data."""
        pixel_data = (
            explicit(0x7FE00010, 'OB', b'', length=UNDEFINED_LENGTH)
            + item(pack('<L', 0))
            + item(b'\xff\xd8\xff\xd9')
            + item(b'\x01\x02')
            + SEQUENCE_DELIMITER
        )
        data = (
            HEADER + meta(JPEGBaseline8Bit) + pixel_data + EXPL_PATIENT_NAME
        )
        result = read_bytes(data, raw=False)
        assert result.success
        assert [] == result.messages

        seq = result.dataset['7FE0,0010']
        assert isinstance(seq, Sequence)
        assert 'Encapsulated Pixel Data' == seq.name
        assert 'OB' == seq.VR
        assert [
            'Item', 'Pixel Data Item', 'Pixel Data Item'
        ] == [frag.name for frag in seq]
        assert ['OB'] * 3 == [frag.VR for frag in seq]
        assert [
            b'\x00\x00\x00\x00', b'\xff\xd8\xff\xd9', b'\x01\x02'
        ] == [frag.bin for frag in seq]
        assert all(0 == len(frag) for frag in seq)
        # the sequence delimiter ends the encapsulated pixel data
        assert 'Doe^John' == result.dataset['0010,0010'].value
        assert ['0002,0010', '7FE0,0010', '0010,0010'] == [
            e.tag for e in result.dataset
        ]

    def test_implicit_VR(self):
        """Test encapsulated pixel data in implicit VR."""
        pixel_data = (
            implicit(0x7FE00010, b'', length=UNDEFINED_LENGTH)
            + item() + item(b'\x01\x02') + SEQUENCE_DELIMITER
        )
        result = read_bytes(pixel_data)
        assert result.success
        seq = result.dataset['7FE0,0010']
        assert 'OW' == seq.VR
        assert ['Item', 'Pixel Data Item'] == [frag.name for frag in seq]

    def test_native_pixel_data(self):
        """Test defined length pixel data is an ordinary element."""
        result = read_bytes(implicit(0x7FE00010, b'\x00\x01\x02\x03'))
        assert result.success
        elem = result.dataset['7FE0,0010']
        assert not isinstance(elem, Sequence)
        assert 'Pixel Data' == elem.name
        assert b'\x00\x01\x02\x03' == elem.bin
        assert elem.value is None

    def test_undefined_length_fragment(self):
        pixel_data = (
            implicit(0x7FE00010, b'', length=UNDEFINED_LENGTH)
            + item() + item(length=UNDEFINED_LENGTH)
        )
        result = read_bytes(pixel_data)
        assert not result.success
        assert [DecodeFailure] == categories(result)


class TestDatasetReader:
    def test_existing_dataset(self):
        """Test elements are added to a given dataset."""
        ds = Dataset()
        result = read_bytes(IMPL_PATIENT_NAME, dataset=ds)
        assert result.dataset is ds
        assert 1 == len(ds)

    def test_reader(self):
        ds = Dataset()
        reader = DatasetReader(ds, HEADER + IMPL_PATIENT_NAME)
        result = reader.read()
        assert isinstance(result, ParseResult)
        assert result.success
        assert reader.signature

    def test_buffer_limit(self, tiny_buffer_limit):
        """Test a buffer larger than the maximum fails."""
        result = read_bytes(IMPL_PATIENT_NAME + IMPL_PATIENT_NAME)
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 0 == len(result.dataset)

    def test_diagnostics(self):
        """Test the diagnostic and result helpers."""
        data = IMPL_PATIENT_NAME + implicit(0x00100020, b'ABC', length=101)
        result = read_bytes(data)
        assert [StandardViolationWarning] == [
            msg.category for msg in result.warnings
        ]
        assert [LengthMismatchError] == [
            msg.category for msg in result.errors
        ]
        assert result.errors[0].is_fatal
        assert not result.warnings[0].is_fatal
        msg = Diagnostic(HeaderWarning, 'Some message')
        assert 'Some message' == str(msg)

    def test_logging(self, caplog):
        """Test diagnostics are logged."""
        data = implicit(0x00100020, b'ABC') + SEQUENCE_DELIMITER
        data += implicit(0x00100030, b'ABCD', length=10)
        with caplog.at_level(logging.WARNING, logger='dicomtree'):
            read_bytes(data)

        levels = [record.levelno for record in caplog.records]
        assert [logging.WARNING, logging.WARNING, logging.ERROR] == levels

    def test_debug_logging(self, enable_debugging, caplog):
        with caplog.at_level(logging.DEBUG, logger='dicomtree'):
            read_bytes(HEADER + IMPL_PATIENT_NAME, raw=False)

        assert "00000080: 'DICM' prefix found" in caplog.text
        assert "00000084: 10 00 10 00 08 00 00 00" in caplog.text


class TestDcmread:
    def test_read_file(self, write_file):
        """Test reading a file from a path."""
        path = write_file(HEADER + meta(ExplicitVRLittleEndian)
                          + EXPL_PATIENT_NAME)
        result = dcmread(path)
        assert result.success
        assert result.signature
        assert 'Doe^John' == result.dataset['0010,0010'].value

        result = dcmread(str(path))
        assert result.success

    def test_read_file_override(self, write_file):
        path = write_file(HEADER + meta(ExplicitVRLittleEndian)
                          + IMPL_PATIENT_NAME)
        result = dcmread(path, syntax=ImplicitVRLittleEndian)
        assert result.success
        assert 'Doe^John' == result.dataset['0010,0010'].value

    def test_missing(self, tmp_path):
        ds = Dataset()
        result = dcmread(tmp_path / 'missing.dcm', dataset=ds)
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 'does not exist' in str(result.messages[0])
        assert result.dataset is ds
        assert 0 == len(ds)

    def test_directory(self, tmp_path):
        result = dcmread(tmp_path)
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 'directory' in str(result.messages[0])

    def test_too_small(self, write_file):
        result = dcmread(write_file(b'\x00' * 8))
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 'too small' in str(result.messages[0])

    def test_unreadable(self, write_file, monkeypatch):
        path = write_file(HEADER + IMPL_PATIENT_NAME)
        monkeypatch.setattr('os.access', lambda path, mode: False)
        result = dcmread(path)
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 'permission' in str(result.messages[0])

    def test_small_file_without_header(self, write_file):
        """Test a file big enough to check but too small for a header."""
        result = dcmread(write_file(IMPL_PATIENT_NAME))
        assert not result.success
        assert [PreconditionError] == categories(result)
        assert 'too small to contain a DICOM header' in str(
            result.messages[0]
        )

    def test_buffer_limit(self, write_file, tiny_buffer_limit):
        result = dcmread(write_file(HEADER + IMPL_PATIENT_NAME))
        assert not result.success
        assert 'maximum buffer size' in str(result.messages[0])


@pytest.mark.parametrize(
    'syntax, body',
    [
        (ImplicitVRLittleEndian, IMPL_PATIENT_NAME),
        (ExplicitVRLittleEndian, EXPL_PATIENT_NAME),
        (
            ExplicitVRBigEndian,
            explicit(0x00100010, 'PN', b'Doe^John', little_endian=False)
        ),
    ]
)
def test_uncompressed_syntaxes(syntax, body):
    """Test the same element in each uncompressed transfer syntax."""
    result = read_bytes(HEADER + meta(syntax) + body, raw=False)
    assert result.success
    assert syntax == result.transfer_syntax
    assert 'Doe^John' == result.dataset['0010,0010'].value
