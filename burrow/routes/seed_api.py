"""Seed coercion API route.

Turns a user-supplied seed (int, numeric string, arbitrary text or nothing)
into the integer seed the generator and the map endpoints accept.
"""
from flask import Blueprint, request, jsonify
import hashlib, random

from burrow.dungeon.config import ConfigError

bp_seed = Blueprint('seed_api', __name__)

SEED_MAX = 2**63 - 1


def coerce_seed(payload_seed):
    """Convert provided seed (int or str) into a bounded non-negative 63-bit int."""
    if payload_seed is None:
        return random.randint(0, 2**31 - 1)
    if isinstance(payload_seed, bool):
        raise ConfigError('seed must be an integer or string')
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(0, 2**31 - 1)
        if s.isdigit():
            return int(s) % SEED_MAX
        h = hashlib.sha256(s.encode('utf-8')).digest()
        return int.from_bytes(h[:8], 'big') % SEED_MAX
    raise ConfigError('seed must be an integer or string')


@bp_seed.route('/api/dungeon/seed', methods=['POST'])
def set_seed():
    """Normalize (or generate) a dungeon seed.

    Body JSON (optional): { "seed": <int|str|null> }
    - seed omitted/null/empty => random seed.
    - numeric => used directly (bounded); other strings => SHA-256 derived.

    Response: { "seed": <int> }
    """
    data = request.get_json(silent=True) or {}
    seed = coerce_seed(data.get('seed'))
    return jsonify({"seed": seed})
