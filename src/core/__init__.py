"""
Couche domaine (core).

Contient les ports (interfaces abstraites et objets retournés) et les objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- ports/ : Contrat du client de la base de films et objets associés
- value_objects/ : Objets valeur immutables (ContentKind, FailureKind)
"""
