import pytest
from z340_reverser.assembler import (
    BlockPolicy,
    Z340_BLOCKS,
    Z340_GRID,
    Z340_LIFE_IS,
    Z340_SHIFT,
    assemble,
    read_block,
    reverse_transposition,
    split_segments,
)
from z340_reverser.ciphertext import Z340, Z340_ROWS
from z340_reverser.models.grid import GridSpec
from z340_reverser.utils import ConfigurationError


INTERMEDIATE_RAW = (
    "H+M8|CV@KEB+*5k.L"
    "dR(UVFFz9<>#Z3P>L"
    "(MpOGp+2|G+l%WO&D"
    "#2b^D(+4(5J+VW)+k"
    "p+fZPYLR/8KjRk.#K"
    "_Rq#2|<z29^%OF1*H"
    "SMF;+BLKJp+l2_cTf"
    "BpzOUNyG)y7t-cYA2"
    "N:^j*Xz6dpclddG+4"
    "-RR+4Ef|pz/JNb>M)"
    "+l5||.VqL+Ut*5cUG"
    "R)VE5FVZ2cW+|TB45"
    "|TC^D4ct-c+zJYM(+"
    "y.LW+B.;+B31cOp+8"
    "lXz6Ppb&RG+BCOTBz"
    "F1K<SMF6N*(+HK29^"
    ":OFTO<Sf4pl/Ucy59"
    "^W(+l#2C.B)7<FBy-"
    "|FkdW<7tB_YOB*-Cc"
    ">MDHNpkSzZO8A|K;+"
)

INTERMEDIATE = (
    "H+M8ÖCV@KEB+*5k.L"
    "dR(UVFFz9<>#Z3P>L"
    "(MpOGp+2ÖG+l%WO&D"
    "#2b^D(+4(5J+VW)+k"
    "p+fZPYLR/8KjRk.#K"
    "_Rq#2Ö<z29^%OF1*H"
    "SMFÄ+BLKJp+l2_cTf"
    "BpzOUNyG)y7t-cYA2"
    "N:^j*Xz6dpclddG+4"
    "-RR+4EfÖpz/JNb>M)"
    "+l5ÖÖ.VqL+Ut*5cUG"
    "R)VE5FVZ2cW+ÖTB45"
    "ÖTC^D4ct-c+zJYM(+"
    "y.LW+B.Ä+B31cOp+8"
    "lXz6Ppb&RG+BCOTBz"
    "F1K<SMF6N*(+HK29^"
    ":OFTO<Sf4pl/Ucy59"
    "^W(+l#2C.B)7<FBy-"
    "ÖFkdW<7tB_YOB*-Cc"
    ">MDHNpkSzZO8AÖKÄ+"
)


def distinct_block(length: int) -> str:
    return "".join(chr(0x100 + i) for i in range(length))


class TestZ340Transcription:
    """Test suite for the built-in transcription"""

    def test_shape(self):
        """Test the transcription is 20 rows of 17 symbols"""
        assert len(Z340_ROWS) == 20
        assert all(len(row) == 17 for row in Z340_ROWS)
        assert len(Z340) == 340

    def test_block_policies(self):
        """Test the three Z-340 blocks"""
        assert [policy.name for policy in Z340_BLOCKS] == ["Z-340-1", "Z-340-2", "Z-340-3"]
        assert Z340_GRID.length == 153
        assert Z340_BLOCKS[1].correction == Z340_SHIFT
        assert Z340_BLOCKS[1].exclusion == Z340_LIFE_IS
        assert Z340_BLOCKS[2].grid is None


class TestSplitSegments:
    """Test suite for split_segments"""

    def test_z340_segments(self):
        """Test the segment lengths are 153, 153 and the remainder"""
        segments = split_segments(Z340, Z340_BLOCKS)
        assert [len(segment) for segment in segments] == [153, 153, 34]
        assert "".join(segments) == Z340

    def test_too_short(self):
        """Test a ciphertext shorter than the fixed blocks is rejected"""
        with pytest.raises(ConfigurationError, match="Ciphertext length 305 < 306"):
            split_segments(Z340[:305], Z340_BLOCKS)

    def test_remainder_must_be_last(self):
        """Test only the last policy may take the remainder"""
        policies = (BlockPolicy(name="a"), BlockPolicy(name="b", length=3))
        with pytest.raises(ConfigurationError, match="Only the last block"):
            split_segments("abcdef", policies)

    def test_uncovered_tail(self):
        """Test symbols left over by fixed-length policies are rejected"""
        policies = (BlockPolicy(name="a", length=3),)
        with pytest.raises(ConfigurationError, match="covered by the blocks"):
            split_segments("abcdef", policies)

    def test_empty_remainder(self):
        """Test a remainder block may be empty"""
        assert split_segments(Z340[:306], Z340_BLOCKS)[2] == ""


class TestReadBlock:
    """Test suite for read_block"""

    def test_pass_through(self):
        """Test a policy without a grid returns the segment unchanged"""
        assert read_block("abc", BlockPolicy(name="plain")) == "abc"

    def test_second_block_splices_untransposed_run(self):
        """Test block two ends with offsets 11..16 of the corrected block"""
        block = distinct_block(153)
        corrected = Z340_SHIFT.apply(block)
        result = read_block(block, Z340_BLOCKS[1])
        assert result[147:153] == corrected[11:17]
        assert sorted(result) == sorted(block)

    def test_first_block_uses_plain_walk(self):
        """Test block one starts with the cells at offsets 0, 19, 38"""
        block = distinct_block(153)
        result = read_block(block, Z340_BLOCKS[0])
        assert result[:3] == block[0] + block[19] + block[38]

    def test_wrong_grid(self):
        """Test a segment that does not match its grid is rejected"""
        policy = BlockPolicy(name="bad", length=10, grid=GridSpec(rows=3, cols=3))
        with pytest.raises(ConfigurationError):
            read_block("x" * 10, policy)


class TestAssemble:
    """Test suite for the full pipeline"""

    def test_raw_golden_output(self):
        """Test the intermediate ciphertext before normalization"""
        assert assemble(Z340) == INTERMEDIATE_RAW

    def test_golden_output(self):
        """Test the published intermediate ciphertext"""
        assert reverse_transposition() == INTERMEDIATE

    def test_designators_removed(self):
        """Test ; and | do not survive normalization"""
        result = reverse_transposition(Z340)
        assert ";" not in result
        assert "|" not in result

    def test_without_normalization(self):
        """Test normalization can be skipped"""
        assert reverse_transposition(Z340, normalize=False) == INTERMEDIATE_RAW

    def test_third_block_unchanged(self):
        """Test the last segment is copied verbatim"""
        assert assemble(Z340)[306:] == Z340[306:]

    def test_life_is_appended(self):
        """Test the untransposed run closes the second block"""
        assert assemble(Z340)[300:306] == "7<FBy-"

    def test_length_preserved(self):
        """Test no symbol is lost or duplicated"""
        result = assemble(Z340)
        assert len(result) == len(Z340)
        assert sorted(result) == sorted(Z340)
