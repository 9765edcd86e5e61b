from flask_wtf import FlaskForm
from wtforms import FloatField, StringField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange

class ProdutoForm(FlaskForm):
    # Usado tanto em "Adicionar" como em "Editar"
    nome = StringField('Nome', validators=[
        DataRequired(message="Nome é obrigatório"),
        Length(max=100, message="Nome deve ter no máximo 100 caracteres")
    ])

    preco = FloatField('Preço', validators=[
        InputRequired(message="Preço é obrigatório"),
        NumberRange(min=0, message="Preço não pode ser negativo")
    ])
