"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI (uniquement si ENABLE_DOCS).

custom_openapi(app) modifie le schéma généré par FastAPI pour :

décrire les conventions des formulaires (un seul champ `clé=valeur`),

rappeler les codes de retour (303, 400, 404).

🔹 Avantages :

La doc reste cohérente avec le comportement réel des routes HTML.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Liste de todos en mémoire, rendue en HTML.\n\n"
            "### Conventions\n"
            "- Les POST attendent un seul champ `application/x-www-form-urlencoded` (`name=` ou `id=`).\n"
            "- Une mutation réussie répond `303 See Other` vers `/`.\n"
            "- Corps mal formé ou identifiant illisible : `400`.\n"
            "- Route inconnue : `404` avec le corps `Oops! Not Found`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
