"""Sample articles and categories used when the store is unavailable.

Records keep the field names of the upstream sample feed (``imageUrl``,
``category`` by name, ``date``, ``author``, ``viewCount``); see
``surfjournal.data.adapters`` for the mapping to API rows.
"""

from typing import Any

MOCK_CATEGORIES: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Competitions",
        "slug": "competitions",
        "description": "Championship tour, qualifiers and local contests",
        "count": 3,
    },
    {
        "id": 2,
        "name": "Big Waves",
        "slug": "big-waves",
        "description": "Swells, tow-in sessions and giant surf records",
        "count": 2,
    },
    {
        "id": 3,
        "name": "Equipment",
        "slug": "equipment",
        "description": "Boards, fins, wetsuits and shaping",
        "count": 1,
    },
    {
        "id": 4,
        "name": "Travel",
        "slug": "travel",
        "description": "Surf trips and destinations",
        "count": 1,
    },
    {
        "id": 5,
        "name": "Environment",
        "slug": "environment",
        "count": 1,
    },
]

MOCK_ARTICLES: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Saquarema crowns a new champion after a final decided in the last minute",
        "slug": "saquarema-crowns-new-champion",
        "excerpt": "A late backhand combo turned the heat around at Itaúna beach.",
        "content": "<p>With the clock running out, the challenger found the set of the day at Itaúna and "
        "posted an excellent score to take the title in front of a packed beach.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1502680390469-be75c86b636f",
        "category": "Competitions",
        "date": "2025-06-23T18:30:00",
        "author": "Marina Costa",
        "viewCount": 1520,
        "featured": True,
    },
    {
        "id": 2,
        "title": "Nazaré swell alert: forecasters expect faces above 20 meters",
        "slug": "nazare-swell-alert",
        "excerpt": "A deep Atlantic low is lining up the first big session of the season.",
        "content": "<p>Tow teams are on standby as buoys confirm long-period energy heading to Praia do Norte.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1505142468610-359e7d316be0",
        "category": "Big Waves",
        "date": "2025-06-21T09:00:00",
        "author": "Rafael Nunes",
        "viewCount": 2874,
        "featured": True,
    },
    {
        "id": 3,
        "title": "Recycled foam boards reach the pro level",
        "slug": "recycled-foam-boards-pro-level",
        "excerpt": "Shapers are testing blanks made from reclaimed EPS in competition boards.",
        "content": "<p>Two shaping houses presented boards built from recycled blanks that match the flex "
        "of traditional PU.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1531722569936-825d3dd91b15",
        "category": "Equipment",
        "date": "2025-06-19T14:10:00",
        "author": "Carla Mendes",
        "viewCount": 640,
        "featured": False,
    },
    {
        "id": 4,
        "title": "Qualifying series heads to Florianópolis",
        "slug": "qualifying-series-florianopolis",
        "excerpt": "Joaquina will host the next stop with a waiting period of nine days.",
        "content": "<p>Local rippers are favourites as the tour returns to the island.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1455729552865-3658a5d39692",
        "category": "Competitions",
        "date": "2025-06-17T11:45:00",
        "author": "Marina Costa",
        "viewCount": 980,
        "featured": False,
    },
    {
        "id": 5,
        "title": "Five right-hand point breaks for your next trip",
        "slug": "five-right-hand-point-breaks",
        "excerpt": "From Chicama to Jeffreys Bay, long walls for regular footers.",
        "imageUrl": "https://images.unsplash.com/photo-1509914398892-963f53e6e2f1",
        "category": "Travel",
        "date": "2025-06-15T08:20:00",
        "author": "Pedro Alves",
        "featured": False,
    },
    {
        "id": 6,
        "title": "Jaws paddle session rewrites the big wave record book",
        "slug": "jaws-paddle-session-record",
        "excerpt": "Three surfers paddled into waves previously reserved for tow-in.",
        "content": "<p>Peahi delivered clean conditions and the crew made the most of it.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1513569771920-c9e1d31714af",
        "category": "Big Waves",
        "date": "2025-06-12T16:00:00",
        "author": "Rafael Nunes",
        "viewCount": 1733,
        "featured": True,
    },
    {
        "id": 7,
        "title": "Beach clean-up gathers 400 volunteers in Ubatuba",
        "slug": "beach-cleanup-ubatuba",
        "excerpt": "Surf schools joined forces to remove more than two tonnes of waste.",
        "content": "<p>The morning session was followed by a free surf class for local kids.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1618477461853-cf6ed80faba5",
        "category": "Environment",
        "date": "2025-06-10T07:30:00",
        "author": "Carla Mendes",
        "viewCount": 312,
        "featured": False,
    },
    {
        "id": 8,
        "title": "Junior championship reveals the next generation of aerialists",
        "slug": "junior-championship-aerialists",
        "excerpt": "Under-16 finalists landed rotations that would score in any pro heat.",
        "content": "<p>The final at Maresias was decided by a full rotation in the last exchange.</p>",
        "imageUrl": "https://images.unsplash.com/photo-1530870110042-98b2cb110834",
        "category": "Competitions",
        "date": "2025-06-08T13:05:00",
        "author": "Pedro Alves",
        "viewCount": 455,
        "featured": False,
    },
]
