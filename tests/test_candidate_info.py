from utils.candidate_info import extract_email, extract_name, name_from_filename


def test_email_is_found_and_lowercased():
    text = "Jane Doe\nContact: Jane.Doe@Example.COM | +1 555 0100"
    assert extract_email(text) == "jane.doe@example.com"


def test_email_missing():
    assert extract_email("no address here") == ''
    assert extract_email(None) == ''


def test_name_from_first_line():
    assert extract_name("Jane Doe\njane@example.com\nSkills") == "Jane Doe"


def test_name_skips_headings_and_contact_lines():
    text = "RESUME\n\njane@example.com\nhttps://linkedin.com/in/jd\nJOHN SMITH\nExperience"
    assert extract_name(text) == "John Smith"


def test_name_before_separator():
    assert extract_name("Ana María | ana@example.com") == "Ana María"


def test_name_falls_back_to_filename():
    assert extract_name("", "resumes/jane_doe.pdf") == "Jane Doe"
    assert extract_name("Objective: build things 2024", "mark-twain.PDF") == "Mark Twain"


def test_filename_without_stem():
    assert name_from_filename("") == "Unknown"


def test_multi_word_headings_are_not_names():
    text = "PROFESSIONAL SUMMARY\nBuilt APIs for 5 years\nTECHNICAL SKILLS\nWork Experience"
    assert extract_name(text, "lee_chen.pdf") == "Lee Chen"
