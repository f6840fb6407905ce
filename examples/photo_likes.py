"""Users liking photos: composable IDs in practice.

Two users and one photo. Each like is keyed by a compound ID, so liking the
same photo twice (from any client) targets the same record. Friendships are
unordered, so they use a symmetric ID.

    Like[User[...],Photo[...]]       directed: who liked what
    Friendship[User[...],User[...]]  symmetric: sorted, order-free
"""

from ntid import (
    decode_id_from_bytes,
    encode_id_to_bytes,
    get_type_from_id,
    make_compound_id,
    make_id,
    make_symmetric_id,
)

alice = make_id("User")
bob = make_id("User")
photo = make_id("Photo")

likes: dict[str, bool] = {}
for user in (alice, bob, alice):
    likes[make_compound_id("Like", [user, photo])] = True

print(f"{len(likes)} likes on {photo}")
for like_id in likes:
    print(f"  {get_type_from_id(like_id)}: {like_id}")

friendship = make_symmetric_id("Friendship", [alice, bob])
assert friendship == make_symmetric_id("Friendship", [bob, alice])
print(f"Friendship: {friendship}")

# Store only the 17 random bytes when the column already implies the type
stored = encode_id_to_bytes(photo)
print(f"Photo as bytes: {stored.hex()} ({len(stored)} bytes)")
assert decode_id_from_bytes("Photo", stored) == photo
