"""
Mock OMDb API responses for testing.

Contains realistic responses from the OMDb API for search, detail and season
lookups. These fixtures are used with respx to mock httpx calls in tests.
"""

OMDB_URL = "https://www.omdbapi.com/"

# Search response for "Matrix" query
# GET /?s=Matrix&page=1
OMDB_SEARCH_RESPONSE = {
    "Search": [
        {
            "Title": "The Matrix",
            "Year": "1999",
            "imdbID": "tt0133093",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/MV5BNzQzOTk3OTAt.jpg",
        },
        {
            "Title": "The Matrix Reloaded",
            "Year": "2003",
            "imdbID": "tt0234215",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/MV5BODE0MzZhZTgt.jpg",
        },
        {
            "Title": "The Matrix Revisited",
            "Year": "2001",
            "imdbID": "tt0295432",
            "Type": "movie",
            "Poster": "N/A",
        },
    ],
    "totalResults": "142",
    "Response": "True",
}

# No match: the API answers 200 with Response False
OMDB_SEARCH_NOT_FOUND_RESPONSE = {
    "Response": "False",
    "Error": "Movie not found!",
}

OMDB_SEARCH_TOO_MANY_RESPONSE = {
    "Response": "False",
    "Error": "Too many results.",
}

# GET /?i=tt0111161&plot=short
OMDB_MOVIE_DETAIL_RESPONSE = {
    "Title": "The Shawshank Redemption",
    "Year": "1994",
    "Rated": "R",
    "Released": "14 Oct 1994",
    "Runtime": "142 min",
    "Genre": "Drama",
    "Director": "Frank Darabont",
    "Writer": "Stephen King, Frank Darabont",
    "Actors": "Tim Robbins, Morgan Freeman, Bob Gunton",
    "Plot": "Over the course of several years, two convicts form a friendship.",
    "Language": "English",
    "Country": "United States",
    "Awards": "Nominated for 7 Oscars. 21 wins & 43 nominations total",
    "Poster": "https://m.media-amazon.com/images/M/MV5BNDE3ODcxYzMt.jpg",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "9.3/10"},
        {"Source": "Rotten Tomatoes", "Value": "91%"},
        {"Source": "Metacritic", "Value": "82/100"},
    ],
    "Metascore": "82",
    "imdbRating": "9.3",
    "imdbVotes": "2,900,000",
    "imdbID": "tt0111161",
    "Type": "movie",
    "DVD": "N/A",
    "BoxOffice": "$28,767,189",
    "Production": "N/A",
    "Website": "N/A",
    "Response": "True",
}

# GET /?i=tt0903747&plot=short
OMDB_SERIES_DETAIL_RESPONSE = {
    "Title": "Breaking Bad",
    "Year": "2008–2013",
    "Rated": "TV-MA",
    "Released": "20 Jan 2008",
    "Runtime": "49 min",
    "Genre": "Crime, Drama, Thriller",
    "Director": "N/A",
    "Writer": "Vince Gilligan",
    "Actors": "Bryan Cranston, Aaron Paul, Anna Gunn",
    "Plot": "A chemistry teacher diagnosed with cancer turns to manufacturing meth.",
    "Language": "English, Spanish",
    "Country": "United States",
    "Awards": "Won 16 Primetime Emmys. 163 wins & 269 nominations total",
    "Poster": "https://m.media-amazon.com/images/M/MV5BYmQ4YWMxYjUt.jpg",
    "Ratings": [{"Source": "Internet Movie Database", "Value": "9.5/10"}],
    "Metascore": "N/A",
    "imdbRating": "9.5",
    "imdbVotes": "2,100,000",
    "imdbID": "tt0903747",
    "Type": "series",
    "totalSeasons": "5",
    "Response": "True",
}

OMDB_DETAIL_NOT_FOUND_RESPONSE = {
    "Response": "False",
    "Error": "Incorrect IMDb ID.",
}


def season_response(imdb_id: str, season: int, episode_count: int, total_seasons: int = 3) -> dict:
    """Build a GET /?i=<id>&Season=<n> response with episode_count episodes."""
    return {
        "Title": "Some Series",
        "Season": str(season),
        "totalSeasons": str(total_seasons),
        "Episodes": [
            {
                "Title": f"Episode {number}",
                "Released": "2008-01-20",
                "Episode": str(number),
                "imdbRating": "8.5",
                "imdbID": f"{imdb_id}s{season}e{number}",
            }
            for number in range(1, episode_count + 1)
        ],
        "Response": "True",
    }


def detail_response(imdb_id: str, genre: str, title: str = "Some Title", **extra) -> dict:
    """Build a minimal successful detail response for a given genre."""
    data = {
        "Title": title,
        "Year": "2010",
        "Genre": genre,
        "imdbID": imdb_id,
        "Type": "movie",
        "Poster": "N/A",
        "Response": "True",
    }
    data.update(extra)
    return data
