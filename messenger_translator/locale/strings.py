"""User-facing strings, one table per locale."""

DEFAULT_LOCALE = "en"

STRINGS = {
    "en": {
        "help": (
            "Send me any message and I will translate it into your chosen language.\n\n"
            "Commands:\n"
            "--help: show this message\n"
            "--language <language>: change the language I translate into "
            "(e.g. \"--language fr\" or \"--language French\")"
        ),
        "attachments": "Sorry, I can only translate text. Attachments are not supported.",
        "language_changed": "Done! Your messages will now be translated into {language}.",
        "language_unsupported": "Sorry, \"{language}\" is not a language I can translate into.",
        "language_error": "Sorry, I couldn't change your language right now. Please try again later.",
        "error": "Sorry, something went wrong while processing your message. Please try again later.",
    },
    "es": {
        "help": (
            "Envíame cualquier mensaje y lo traduciré al idioma que elijas.\n\n"
            "Comandos:\n"
            "--help: muestra este mensaje\n"
            "--language <idioma>: cambia el idioma de traducción "
            "(p. ej. \"--language fr\" o \"--language francés\")"
        ),
        "attachments": "Lo siento, solo puedo traducir texto. Los archivos adjuntos no son compatibles.",
        "language_changed": "¡Listo! Tus mensajes ahora se traducirán al {language}.",
        "language_unsupported": "Lo siento, \"{language}\" no es un idioma al que pueda traducir.",
        "language_error": "Lo siento, no pude cambiar tu idioma en este momento. Inténtalo más tarde.",
        "error": "Lo siento, algo salió mal al procesar tu mensaje. Inténtalo más tarde.",
    },
    "fr": {
        "help": (
            "Envoyez-moi un message et je le traduirai dans la langue de votre choix.\n\n"
            "Commandes :\n"
            "--help : affiche ce message\n"
            "--language <langue> : change la langue de traduction "
            "(par ex. \"--language es\" ou \"--language espagnol\")"
        ),
        "attachments": "Désolé, je ne peux traduire que du texte. Les pièces jointes ne sont pas prises en charge.",
        "language_changed": "C'est fait ! Vos messages seront désormais traduits en {language}.",
        "language_unsupported": "Désolé, « {language} » n'est pas une langue vers laquelle je peux traduire.",
        "language_error": "Désolé, je n'ai pas pu changer votre langue. Veuillez réessayer plus tard.",
        "error": "Désolé, une erreur s'est produite lors du traitement de votre message. Veuillez réessayer plus tard.",
    },
    "de": {
        "help": (
            "Schick mir eine Nachricht und ich übersetze sie in die Sprache deiner Wahl.\n\n"
            "Befehle:\n"
            "--help: zeigt diese Nachricht\n"
            "--language <Sprache>: ändert die Zielsprache "
            "(z. B. \"--language fr\" oder \"--language Französisch\")"
        ),
        "attachments": "Entschuldigung, ich kann nur Text übersetzen. Anhänge werden nicht unterstützt.",
        "language_changed": "Erledigt! Deine Nachrichten werden jetzt ins {language} übersetzt.",
        "language_unsupported": "Entschuldigung, \"{language}\" ist keine Sprache, in die ich übersetzen kann.",
        "language_error": "Entschuldigung, ich konnte deine Sprache gerade nicht ändern. Bitte versuche es später erneut.",
        "error": "Entschuldigung, bei der Verarbeitung deiner Nachricht ist ein Fehler aufgetreten. Bitte versuche es später erneut.",
    },
    "fil": {
        "help": (
            "Padalhan mo ako ng kahit anong mensahe at isasalin ko ito sa wikang pinili mo.\n\n"
            "Mga utos:\n"
            "--help: ipakita ang mensaheng ito\n"
            "--language <wika>: palitan ang wikang pagsasalinan "
            "(hal. \"--language fr\" o \"--language French\")"
        ),
        "attachments": "Paumanhin, teksto lamang ang kaya kong isalin. Hindi suportado ang mga attachment.",
        "language_changed": "Tapos na! Isasalin na ang iyong mga mensahe sa {language}.",
        "language_unsupported": "Paumanhin, ang \"{language}\" ay hindi wikang kaya kong pagsalinan.",
        "language_error": "Paumanhin, hindi ko mapalitan ang iyong wika ngayon. Subukan muli mamaya.",
        "error": "Paumanhin, nagkaproblema sa pagproseso ng iyong mensahe. Subukan muli mamaya.",
    },
}
