"""End-to-end recomputation of a complete fighter sheet."""

import yaml

from beefbrain.sheet.engine import recompute, update_sheet


class TestFighterSheet:
    """Stale and up-to-date versions of the same level 1 fighter."""

    def test_unchanged_input_produces_unchanged_output(self, final_sheet):
        assert recompute(final_sheet) is final_sheet

    def test_stale_input_produces_final_output(self, stale_sheet, final_sheet):
        assert recompute(stale_sheet) == final_sheet

    def test_second_pass_finds_nothing(self, stale_sheet):
        first = update_sheet(stale_sheet)
        second = update_sheet(first.text)

        assert first.changed
        assert second.changes == []
        assert second.text is first.text

    def test_every_contribution_matches_its_ability(self, stale_sheet):
        sheet = yaml.safe_load(recompute(stale_sheet))["character"]
        modifiers = {"str": 3, "dex": 1, "con": 2}

        entries = [
            sheet["combat"]["initiative"],
            sheet["combat"]["attack"]["grapple"],
            sheet["combat"]["attack"]["melee"]["_"],
            sheet["combat"]["attack"]["ranged"]["_"],
            *sheet["combat"]["saves"].values(),
            *sheet["combat"]["defense"].values(),
            *sheet["skills"].values(),
        ]
        for total, contributions in entries:
            assert total == sum(contributions.values())
            for key, value in contributions.items():
                if key in modifiers:
                    assert value == modifiers[key], (key, contributions)
