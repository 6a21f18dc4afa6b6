"""
Chord recognition: identify which chords an unordered set of notes could be.

Every distinct input note (or a forced root) is tried as the root; the input
is expressed as intervals above that root and scored against every template
in the catalog. Candidates are ranked by score, with near-ties broken by
template priority (lower = more common chord type).
"""
import collections
import functools

from .chord_encoding import get_chord_templates, score_template
from .constants import MAX_CANDIDATES, TIE_TOLERANCE
from .logger_config import logger
from .pitch import note_to_semitone, semitone_to_note

ChordCandidate = collections.namedtuple(
    "ChordCandidate",
    ["symbol", "score", "priority", "type", "notes", "root", "bass_note",
     "is_inversion", "template", "intervals"],
)


def _unique(items):
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _note_name(note, strict):
    if isinstance(note, str):
        return note
    return semitone_to_note(note_to_semitone(note, strict=strict), "C")


def _compare_candidates(a, b):
    if abs(a.score - b.score) < TIE_TOLERANCE:
        return (a.priority > b.priority) - (a.priority < b.priority)
    return -1 if a.score > b.score else 1


def rank_candidates(candidates, limit=MAX_CANDIDATES):
    """Sort by score descending (near-ties by priority ascending) and keep the top `limit`."""
    ranked = sorted(candidates, key=functools.cmp_to_key(_compare_candidates))
    return ranked[:limit]


def _candidate_roots(notes, forced_root, strict):
    if forced_root:
        return [forced_root]
    roots = []
    seen_pcs = set()
    for note in notes:
        pc = note_to_semitone(note, strict=strict)
        if pc not in seen_pcs:
            seen_pcs.add(pc)
            roots.append(note)
    return roots


def candidates_for_root(notes, root, bass_note, strict=False):
    """Score every template against `notes` with `root` as the hypothesised root."""
    root = _note_name(root, strict)
    bass_note = _note_name(bass_note, strict)
    root_pc = note_to_semitone(root, strict=strict)
    intervals = sorted({(note_to_semitone(n, strict=strict) - root_pc) % 12 for n in notes})
    is_inversion = root != bass_note and root in notes

    found = []
    for template in get_chord_templates():
        score = score_template(intervals, template)
        if score <= 0:
            continue
        chord_notes = [semitone_to_note(root_pc + i, root) for i in template.intervals]
        symbol = root + template.symbol
        if is_inversion:
            symbol = f"{symbol}/{bass_note}"
        found.append(ChordCandidate(
            symbol=symbol,
            score=score,
            priority=template.priority,
            type=template.type,
            notes=chord_notes,
            root=root,
            bass_note=bass_note,
            is_inversion=is_inversion,
            template=template.name,
            intervals=template.intervals,
        ))
    return found


def analyze_chord(notes, forced_root=None, strict=False):
    """
    Identify the chords a set of notes could represent.

    Args:
        notes (list[str]): note names in entry order; notes[0] is the bass note
            used for inversion labelling (e.g. 'C/E').
        forced_root (str): only try this root instead of every input note.
        strict (bool): raise InvalidNoteError on unrecognised note names
            instead of reading them as C. Non-string notes
            count as unrecognised.

    Returns:
        list[ChordCandidate]: at most 7 candidates, best first. Empty when
        fewer than two distinct notes are given or nothing matches.
    """
    if not notes:
        return []
    notes = _unique(_note_name(n, strict) for n in notes)
    if len(notes) < 2:
        return []
    if forced_root is not None:
        forced_root = _note_name(forced_root, strict)

    bass_note = notes[0]
    candidates = []
    for root in _candidate_roots(notes, forced_root, strict):
        candidates.extend(candidates_for_root(notes, root, bass_note, strict=strict))

    ranked = rank_candidates(candidates)
    logger.debug("analyze_chord(%s): %d candidates, best=%s",
                 notes, len(candidates), ranked[0].symbol if ranked else None)
    return ranked


def best_chord(notes, forced_root=None, strict=False):
    """Return the top-ranked candidate, or None when nothing matches."""
    ranked = analyze_chord(notes, forced_root=forced_root, strict=strict)
    return ranked[0] if ranked else None
