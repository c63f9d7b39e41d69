from data_designer_thai_reply.characters import CharacterClass, classify, classify_text


class TestClassify:
    def test_consonant_range_bounds(self):
        assert classify("ก") == CharacterClass.CONSONANT
        assert classify("ฮ") == CharacterClass.CONSONANT

    def test_vowels(self):
        assert classify("ะ") == CharacterClass.VOWEL
        assert classify("า") == CharacterClass.VOWEL
        assert classify("เ") == CharacterClass.VOWEL

    def test_tone_marks(self):
        assert classify("่") == CharacterClass.TONE
        assert classify("๋") == CharacterClass.TONE
        assert classify("็") == CharacterClass.TONE

    def test_special_outside_ranges(self):
        assert classify("ฯ") == CharacterClass.SPECIAL
        assert classify("์") == CharacterClass.SPECIAL

    def test_ranges_take_priority_over_special_set(self):
        assert classify("ๆ") == CharacterClass.VOWEL
        assert classify("฿") == CharacterClass.VOWEL

    def test_everything_else_is_other(self):
        for char in ("a", " ", "1", "๑", "\U0001f600"):
            assert classify(char) == CharacterClass.OTHER


class TestClassifyText:
    def test_thai_greeting(self):
        dist = classify_text("สวัสดีครับ")
        assert dist.consonants == 7
        assert dist.vowels == 3
        assert dist.tones == 0
        assert dist.total == 10

    def test_mixed_text_sums_to_length(self):
        text = "ก่ a ฯ"
        dist = classify_text(text)
        assert (dist.consonants, dist.tones, dist.special, dist.other) == (1, 1, 1, 3)
        assert dist.total == len(text)

    def test_empty(self):
        assert classify_text("").total == 0

    def test_payload(self):
        payload = classify_text("ก").to_payload()
        assert payload == {"consonants": 1, "vowels": 0, "tones": 0, "special": 0, "other": 0, "total": 1}
