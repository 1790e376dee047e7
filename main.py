from wordstem import Tokenizer, stem


data = [
    "These     are not the droids you are looking for.",
    "Obi-Wan never told you what happened to your father.",
    "The relational database generously supports conditional operators.",
]

tokenizer = Tokenizer()

for d in data:
    print(d)
    print(" ".join(tokenizer.tokenize(d)))


for word in ("consisting", "caresses", "ponies", "skis", "herring"):
    print(f"{word} -> {stem(word)}")
