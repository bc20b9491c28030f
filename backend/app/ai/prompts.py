# backend/app/ai/prompts.py

"""
Prompt templates sent to Gemini.

Templates are filled with ``str.format``; literal braces are doubled.
"""

SUMMARY_PROMPT = """
Voici un article à résumer. Le titre de l'article est : "{title}".
Veuillez produire un résumé concis et clair en mettant en évidence les points clés et les idées principales.
Ajoutez des émojis en fonction du contenu de l'article.
Pour plus de contexte, vous pouvez consulter l'article complet à l'adresse suivante : {url}.

Texte :
{content}
"""

# Used as article text when the page has no usable description.
SUMMARY_FALLBACK_CONTENT = (
    'Voici un article intitulé "{title}". '
    "Vous pouvez consulter l'article complet ici : {url}"
)

SUMMARY_LINK_SUFFIX = " \n\nLire l'article complet ici : {url}"

CLASSIFICATION_PROMPT = """
Voici une information issue d'une veille technologique.
Le titre est : "{title}".
Voici le contenu ou résumé de l'article : "{content}".
Veuillez analyser cette information et déterminer sa catégorie parmi les options suivantes :
{categories}
Fournissez uniquement le nom de la catégorie comme réponse.
"""

TECHNO_SYNTHESIS_PROMPT = """
Analyse ces données issues d'une veille technologique :
{data}
Trie-les par pertinence, classe-les par catégories (Actualités, Outils, Bonnes Pratiques, etc.),
et fournis un rapport synthétique prêt à être envoyé.
Assure-toi que chaque catégorie inclut des explications pertinentes et un ordre clair.
"""

TECH_SYNTHESIS_PROMPT = """
Analyse les données suivantes issues d'une base de données Notion.
Identifie et trie uniquement les informations pertinentes pour une veille technologique efficace.
Organise les informations par ordre d'importance et classe-les en catégories (Actualités, Outils, Bonnes Pratiques, etc.).
Voici les données à analyser :

{data}
"""
