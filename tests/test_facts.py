"""Tests para la extracción de datos del candidato."""
from cvmatch.analyzer import UNKNOWN_CANDIDATE, extract_facts, name_from_file_name


def test_leading_capitalized_name():
    facts = extract_facts("John Smith john@x.com +1-555-123-4567", "cv.pdf")
    assert facts.name == "John Smith"


def test_three_word_name_on_first_line():
    facts = extract_facts("  Mary Ann Jones\nSoftware engineer", "x.pdf")
    assert facts.name == "Mary Ann Jones"


def test_name_falls_back_to_file_name():
    facts = extract_facts("experienced engineer with python", "jane_doe_resume.pdf")
    assert facts.name == "jane doe resume"


def test_file_name_extensions_are_case_insensitive():
    assert name_from_file_name("Jane-Doe.DOCX") == "Jane Doe"
    assert name_from_file_name("john_smith.doc") == "john smith"
    # sólo se quitan extensiones de documento
    assert name_from_file_name("notes.txt") == "notes.txt"


def test_unknown_candidate_when_nothing_usable():
    assert extract_facts("", "").name == UNKNOWN_CANDIDATE
    assert extract_facts("lowercase text", ".pdf").name == UNKNOWN_CANDIDATE
    assert extract_facts("lowercase text", "__.pdf").name == UNKNOWN_CANDIDATE


def test_email_and_phone_found():
    facts = extract_facts("Contact: jane.doe+jobs@mail.example.org or +44 20 7946 0958", "f.pdf")
    assert facts.email == "jane.doe+jobs@mail.example.org"
    assert facts.phone == "+44 20 7946 0958"


def test_absent_email_and_phone_are_none():
    facts = extract_facts("No contact details here at all", "f.pdf")
    assert facts.email is None
    assert facts.phone is None
    assert facts.email_display == "Email not found"
    assert facts.phone_display == "Phone not found"


def test_location_label_and_city_pattern():
    assert extract_facts("Location: Austin, Texas\nSkills", "f").location == "Austin, Texas"
    assert extract_facts("based in Madrid, ES since 2019", "f").location == "Madrid, ES"
    facts = extract_facts("nothing relevant", "f")
    assert facts.location is None
    assert facts.location_display == "Location not specified"


def test_name_line_followed_by_title_line():
    assert extract_facts("Jane Doe\nSkills: Python, SQL", "jane.pdf").name == "Jane Doe"
    assert extract_facts("\n  Jane   Doe \nSenior Engineer\n", "jane.pdf").name == "Jane Doe"


def test_years_are_not_phone_numbers():
    assert extract_facts("Jane Doe\nSoftware engineer since 2019", "jane.pdf").phone is None
    assert extract_facts("Jane Doe\nAcme Corp 2015-2019 python", "jane.pdf").phone is None
    assert extract_facts("Jane Doe\nAcme 2015-2019 2020 python\nOther 2020.2022", "jane.pdf").phone is None
    assert extract_facts("Jane Doe\nBorn 01.02.1990", "jane.pdf").phone is None


def test_phone_found_after_years():
    facts = extract_facts("Jane Doe\nAcme Corp 2015-2019\nPhone: 555.123.4567", "jane.pdf")
    assert facts.phone == "555.123.4567"


def test_multi_line_header():
    cv = "Jane Doe\nData Engineer\nAustin, TX\njane@doe.dev | +1 512 555 0199\n\nExperience\nAcme 2018-2023"
    facts = extract_facts(cv, "jane.pdf")
    assert facts.name == "Jane Doe"
    assert facts.email == "jane@doe.dev"
    assert facts.phone == "+1 512 555 0199"
    assert facts.location == "Austin, TX"


def test_skill_lists_are_not_locations():
    assert extract_facts("Jane Doe\nSkills: Python, SQL", "jane.pdf").location is None
    body = "Jane Doe\nEngineer\nSummary\nProfile\nExperience\nWorked in Boston, MA"
    assert extract_facts(body, "jane.pdf").location is None
