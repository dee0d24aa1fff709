from mmolb_parsing.parsing.normalize import normalize, split_plays, split_sentences
from mmolb_parsing.parsing.resolver import parse_play, parse_plays, parse_text
from mmolb_parsing.parsing.rule_sets import Rule, RuleSet, get_rule_set, list_rule_sets

__all__ = [
    "Rule",
    "RuleSet",
    "get_rule_set",
    "list_rule_sets",
    "normalize",
    "parse_play",
    "parse_plays",
    "parse_text",
    "split_plays",
    "split_sentences",
]
