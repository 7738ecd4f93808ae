from app.cache import CacheKeys, Mutation, invalidation_keys


def test_keys_share_prefix_and_entity_names():
    assert CacheKeys.session("p1") == "watchparty:session:p1"
    assert CacheKeys.user_sessions("alice") == "watchparty:user_sessions:alice"
    assert CacheKeys.public_sessions() == "watchparty:public_sessions:all"
    assert CacheKeys.movie(603) == "watchparty:movie:603"


def test_search_key_normalizes_query():
    assert CacheKeys.movie_search("  The   Matrix ") == "watchparty:movie_search:the_matrix"


def test_private_session_creation_only_drops_host_listing():
    keys = invalidation_keys(Mutation.SESSION_CREATED, host_id="alice", is_public=False)
    assert keys == [CacheKeys.user_sessions("alice")]


def test_public_session_creation_drops_public_listing():
    keys = invalidation_keys(Mutation.SESSION_CREATED, host_id="alice", is_public=True)
    assert keys == [CacheKeys.user_sessions("alice"), CacheKeys.public_sessions()]


def test_join_drops_session_joiner_host_and_public_keys():
    keys = invalidation_keys(
        Mutation.SESSION_JOINED,
        session_id="p1",
        user_id="bob",
        host_id="alice",
        is_public=True,
    )
    assert keys == [
        CacheKeys.session("p1"),
        CacheKeys.user_sessions("bob"),
        CacheKeys.user_sessions("alice"),
        CacheKeys.public_sessions(),
    ]


def test_join_keys_are_deduplicated():
    keys = invalidation_keys(
        Mutation.SESSION_JOINED,
        session_id="p1",
        user_id="alice",
        host_id="alice",
        is_public=False,
    )
    assert keys == [CacheKeys.session("p1"), CacheKeys.user_sessions("alice")]


def test_bucket_change_drops_bucket_and_runtime():
    keys = invalidation_keys(Mutation.BUCKET_CHANGED, user_id="alice")
    assert keys == [CacheKeys.bucket("alice"), CacheKeys.bucket_runtime("alice")]


def test_join_drops_every_participant_listing():
    keys = invalidation_keys(
        Mutation.SESSION_JOINED,
        session_id="p1",
        user_id="bob",
        host_id="alice",
        participants=["alice", "carol", "bob"],
        is_public=False,
    )
    assert keys == [
        CacheKeys.session("p1"),
        CacheKeys.user_sessions("bob"),
        CacheKeys.user_sessions("alice"),
        CacheKeys.user_sessions("carol"),
    ]
