"""Intent parsing for the smart assistant.

The intent layer converts a citizen's free-text request (English, Hindi or Romanized Hindi) into a
frozen `ParsedIntent`: the detected service and action, a confidence score, the UI route to open and
a bilingual confirmation message.
"""
