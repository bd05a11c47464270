"""
Couche services (cas d'utilisation).

Les services orchestrent le client API pour produire les valeurs consommees
par la couche de presentation:
- EpisodeCounterService : total des episodes d'une serie (tout-ou-rien)
- GenreFilterService : filtrage par genre en parallele (degradation gracieuse)
- SearchService : composition d'une page de recherche

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes de adapters/.
"""
